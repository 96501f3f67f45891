import pytest
import numpy as np
from debugcam import DebugCameraOptions, DebugCamera, Transform, Y, Z, force_camera_up_in_y_forward_plane
from debugcam.linalg import quat_from_axis_angle, quat_rotate

@pytest.fixture
def rotation_options():
    # Vertical clamp off so only the rotation routine touches orientation.
    return DebugCameraOptions(enabled=True, turning_speed=(0.5, 0.25), vertical_fov=None, force_y_up_direction=False)

def test_yaw_then_pitch(make_app, spawn_camera, rotation_options):
    app = make_app(rotation_options)
    entity = spawn_camera(app)
    app.world.input.add_mouse_motion(2.0, 4.0)
    app.update(0.1)

    yaw, pitch = 0.5 * 0.1 * 2.0, 0.25 * 0.1 * 4.0
    expected = quat_rotate(quat_from_axis_angle(Y, yaw), quat_rotate(quat_from_axis_angle((1, 0, 0), pitch), -Z))
    assert np.allclose(entity.transform.forward(), expected)

def test_motion_events_are_summed(make_app, spawn_camera, rotation_options):
    app = make_app(rotation_options)
    summed = spawn_camera(app)
    app.world.input.add_mouse_motion(1.0, 0.0)
    app.world.input.add_mouse_motion(3.0, 0.0)
    app.update(0.2)

    single = Transform()
    single.rotate_y(0.5 * 0.2 * 4.0)
    assert np.allclose(summed.transform.rotation, single.rotation)

def test_pitch_is_about_the_local_axis(make_app, spawn_camera, rotation_options):
    app = make_app(rotation_options)
    transform = Transform()
    transform.rotate_y(np.pi / 2)
    entity = spawn_camera(app, transform=transform)
    # 0.25 * 1.0 * dy = pi / 4
    app.world.input.add_mouse_motion(0.0, np.pi)
    app.update(1.0)
    s = np.sqrt(0.5)
    assert np.allclose(entity.transform.forward(), (-s, s, 0))

def test_zero_motion_leaves_orientation_untouched(make_app, spawn_camera, rotation_options, snapshot, assert_unchanged):
    app = make_app(rotation_options)
    transform = Transform()
    transform.rotate_y(0.3)
    transform.rotate_local_axis(Z, 0.2)
    entity = spawn_camera(app, transform=transform)
    before = snapshot(entity)
    app.world.input.add_mouse_motion(1.0, 1.0)
    app.world.input.add_mouse_motion(-1.0, -1.0)
    app.update(0.016)
    assert_unchanged(entity, before)

def test_cameras_without_projection_still_rotate(make_app, rotation_options):
    app = make_app(rotation_options)
    entity = app.world.spawn(transform=Transform(), debug_camera=DebugCamera())
    app.world.input.add_mouse_motion(10.0, 0.0)
    app.update(0.1)
    assert not np.allclose(entity.transform.forward(), -Z)

def test_disabled_camera_is_skipped(make_app, spawn_camera, rotation_options, snapshot, assert_unchanged):
    app = make_app(rotation_options)
    entity = spawn_camera(app, marker=DebugCamera(enabled=False))
    before = snapshot(entity)
    app.world.input.add_mouse_motion(10.0, 10.0)
    app.update(0.1)
    assert_unchanged(entity, before)

def test_force_up_removes_roll():
    t = Transform()
    t.rotate_y(0.8)
    t.rotate_local_x(0.3)
    forward = t.forward()
    t.rotate_local_axis(Z, 0.4)  # roll

    force_camera_up_in_y_forward_plane(t)

    assert np.allclose(t.forward(), forward)
    n = np.cross(t.forward(), Y)
    assert np.isclose(np.dot(t.up(), n), 0.0)
    assert t.up()[1] > 0

def test_force_up_skips_vertical_forward():
    t = Transform()
    t.rotate_local_x(np.pi / 2)
    rotation = t.rotation.copy()
    force_camera_up_in_y_forward_plane(t)
    assert np.array_equal(t.rotation, rotation)

def test_force_up_runs_after_rotation(make_app, spawn_camera):
    options = DebugCameraOptions(enabled=True, turning_speed=(0.5, 0.5), vertical_fov=None)
    app = make_app(options)
    transform = Transform()
    transform.rotate_local_axis(Z, 0.5)  # start with some roll
    entity = spawn_camera(app, transform=transform)
    app.world.input.add_mouse_motion(1.0, 1.0)
    app.update(0.1)
    n = np.cross(entity.transform.forward(), Y)
    assert np.isclose(np.dot(entity.transform.up(), n / np.linalg.norm(n)), 0.0)

def test_roll_accumulates_without_force_up(make_app, spawn_camera):
    options = DebugCameraOptions(enabled=True, turning_speed=(0.5, 0.5), vertical_fov=None, force_y_up_direction=False)
    app = make_app(options)
    transform = Transform()
    transform.rotate_local_axis(Z, 0.5)
    entity = spawn_camera(app, transform=transform)
    app.world.input.add_mouse_motion(1.0, 1.0)
    app.update(0.1)
    n = np.cross(entity.transform.forward(), Y)
    assert not np.isclose(np.dot(entity.transform.up(), n / np.linalg.norm(n)), 0.0)
