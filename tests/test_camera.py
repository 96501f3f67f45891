import pytest
import numpy as np
from debugcam import World, DebugCamera, DebugCameraOptions, Transform, Z

def test_marker_defaults():
    marker = DebugCamera()
    assert marker.enabled is True
    assert marker.anchor is None
    assert marker.origin is None
    assert marker.magnification == 1.0
    assert marker.fast_movement is False

def test_anchor_is_stored():
    marker = DebugCamera(anchor=(1, 2, 3))
    assert np.allclose(marker.anchor, (1, 2, 3))

def test_spawn_remembers_origin():
    world = World(DebugCameraOptions())
    transform = Transform.from_xyz(1, 2, 3).looking_at((0, 0, 0))
    entity = world.spawn(transform=transform, debug_camera=DebugCamera())
    origin = entity.debug_camera.origin
    assert origin is not transform
    assert np.allclose(origin.translation, (1, 2, 3))
    assert np.allclose(origin.rotation, transform.rotation)

def test_origin_is_a_snapshot():
    world = World(DebugCameraOptions())
    transform = Transform()
    entity = world.spawn(transform=transform, debug_camera=DebugCamera())
    transform.translation[:] = (5, 5, 5)
    transform.rotate_y(1.0)
    assert np.allclose(entity.debug_camera.origin.translation, (0, 0, 0))
    assert np.allclose(entity.debug_camera.origin.forward(), -Z)

def test_spawn_without_transform_fails_before_spawning():
    world = World(DebugCameraOptions())
    with pytest.raises(ValueError, match="without a 'Transform'"):
        world.spawn(debug_camera=DebugCamera())
    assert world.entities == []

def test_spawn_without_transform_is_fine_when_not_remembering():
    world = World(DebugCameraOptions(remember_original_transform=False))
    entity = world.spawn(debug_camera=DebugCamera())
    assert entity.debug_camera.origin is None

def test_insert_marker_into_existing_entity():
    world = World(DebugCameraOptions())
    entity = world.spawn(transform=Transform.from_xyz(0, 1, 0))
    marker = world.insert_debug_camera(entity)
    assert entity.debug_camera is marker
    assert np.allclose(marker.origin.translation, (0, 1, 0))

def test_insert_marker_without_transform_leaves_entity_untouched():
    world = World(DebugCameraOptions())
    entity = world.spawn()
    with pytest.raises(ValueError):
        world.insert_debug_camera(entity)
    assert entity.debug_camera is None

def test_restore_origin():
    world = World(DebugCameraOptions())
    transform = Transform.from_xyz(1, 0, 0)
    entity = world.spawn(transform=transform, debug_camera=DebugCamera())
    transform.translation += (3, 3, 3)
    transform.rotate_local_x(0.4)
    assert entity.debug_camera.restore_origin(transform) is True
    assert np.allclose(transform.translation, (1, 0, 0))
    assert np.allclose(transform.forward(), -Z)

def test_restore_origin_without_snapshot():
    marker = DebugCamera()
    transform = Transform.from_xyz(2, 2, 2)
    assert marker.restore_origin(transform) is False
    assert np.allclose(transform.translation, (2, 2, 2))

def test_origin_is_never_applied_automatically(app, spawn_camera):
    entity = spawn_camera(app, transform=Transform.from_xyz(0, 0, 0))
    app.world.input.keys.press(app.world.options.keybindings.forward)
    for _ in range(3):
        app.update(0.5)
    assert np.allclose(entity.transform.translation, (0, 0, -3.0))
    assert np.allclose(entity.debug_camera.origin.translation, (0, 0, 0))

def test_despawn_drops_marker():
    world = World(DebugCameraOptions())
    entity = world.spawn(transform=Transform(), debug_camera=DebugCamera())
    world.despawn(entity)
    assert entity not in world.entities
    assert entity.debug_camera is None
