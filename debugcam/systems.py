"""
Per-frame routines of the debug camera.

Each routine takes the `World` and mutates the transforms, projections and
markers of the debug cameras in it. `move_mouse_to_rotate`,
`mouse_scroll_to_zoom` and `keyboard_input_to_movements` may run in any
order; `clamp_camera_rotation_vertically` must run after rotation.
"""
import numpy as np
from .linalg import Y, EPSILON, normalize, reject_from_normalized, quat_from_axis_angle, quat_from_rotation_arc, quat_rotate, signed_angle, is_parallel
from .projection import PerspectiveProjection, OrthographicProjection, MIN_FOV, MAX_FOV

def debug_camera_is_globally_enabled(world) -> bool:
    return world.options.enabled

def vertical_clamp_is_configured(world) -> bool:
    return world.options.vertical_fov is not None

# --- Rotation ---

def move_mouse_to_rotate(world):
    options = world.options
    radians_to_turn = options.turning_speed * world.time.delta_seconds
    rotational_delta = radians_to_turn * world.input.motion_delta()

    if not np.any(rotational_delta):
        return

    for entity in world.debug_cameras():
        transform = entity.transform
        transform.rotate_y(rotational_delta[0])
        transform.rotate_local_x(rotational_delta[1])
        if options.force_y_up_direction:
            force_camera_up_in_y_forward_plane(transform)

def force_camera_up_in_y_forward_plane(transform):
    """
    Rotates `transform` so its up vector lies in the vertical plane through
    its forward direction, removing any roll.
    """
    forward = transform.forward()
    if is_parallel(forward, Y):
        return
    y_forward_plane_normal = normalize(np.cross(forward, Y))
    up = transform.up()
    leveled_up = reject_from_normalized(up, y_forward_plane_normal)
    if np.linalg.norm(leveled_up) < EPSILON:
        return
    transform.rotate(quat_from_rotation_arc(up, normalize(leveled_up)))

# --- Zoom ---

def mouse_scroll_to_zoom(world):
    """
    Zooms each camera by the scroll targeting the window it renders to.

    Scrolling towards the user (negative) magnifies. The magnification stays
    inside `zoom_range`; the projection is scaled by the relative change.
    """
    options = world.options
    minimum_zoom, maximum_zoom = options.zoom_range
    if minimum_zoom <= 0:
        raise ValueError(f"The minimum of zoom_range must be strictly positive, got {minimum_zoom}.")

    for entity in world.debug_cameras(require_camera=True):
        window = world.resolve_window(entity.camera.target)
        if window is None:
            continue
        events = world.input.scroll_events_for(window)
        if not events:
            continue

        pixels_scrolled = sum(mw.y for mw in events)
        marker = entity.debug_camera
        delta = -pixels_scrolled * options.zoom_intensity / 100.0
        next_magnification = float(np.clip(marker.magnification + delta, minimum_zoom, maximum_zoom))
        relative_factor = next_magnification / marker.magnification

        projection = entity.camera.projection
        if isinstance(projection, PerspectiveProjection):
            projection.fov = float(np.clip(projection.fov * relative_factor, MIN_FOV, MAX_FOV))
        elif isinstance(projection, OrthographicProjection):
            projection.scale = projection.scale * relative_factor
        else:
            raise TypeError(f"Cannot zoom unknown projection type '{type(projection).__name__}'.")
        marker.magnification = next_magnification

# --- Movement ---

def _movement_speed(world, marker) -> float:
    options = world.options
    keys = world.input.keys
    fast_key = options.input_options.keybindings.fast_movement
    if fast_key is None:
        return options.movement_speed

    if options.input_options.sticky_fast_movement:
        if keys.just_pressed(fast_key):
            marker.fast_movement ^= True
            if options.verbose:
                print(f"INFO: Fast movement {'on' if marker.fast_movement else 'off'}.")
        fast = marker.fast_movement
    else:
        fast = keys.pressed(fast_key)
    return options.fast_movement_speed if fast else options.movement_speed

def keyboard_input_to_movements(world):
    keys = world.input.keys
    keybindings = world.options.input_options.keybindings
    dt = world.time.delta_seconds

    for entity in world.debug_cameras():
        transform = entity.transform
        speed = _movement_speed(world, entity.debug_camera)

        directions = [
            (keybindings.forward, transform.forward()),
            (keybindings.left, transform.left()),
            (keybindings.back, transform.back()),
            (keybindings.right, transform.right()),
            (keybindings.up, transform.up()),
            (keybindings.down, transform.down()),
            (keybindings.global_up, Y),
            (keybindings.global_down, -Y),
        ]

        delta = np.zeros(3)
        for key, direction in directions:
            if key is not None and keys.pressed(key):
                delta += direction * speed * dt
        transform.translation = transform.translation + delta

# --- Vertical clamp ---

def signed_pitch(forward) -> float:
    """
    Signed angle between `forward` and its projection onto the horizon.

    The sign matches rotations about the camera's left axis: looking up is
    negative, looking down is positive.
    """
    flat_forward = normalize(np.array([forward[0], 0.0, forward[2]]))
    # Normal of the plane spanned by Y and flat_forward.
    n = normalize(np.cross(flat_forward, Y))
    return signed_angle(forward, flat_forward, n)

def clamp_camera_rotation_vertically(world):
    vertical_fov = world.options.vertical_fov
    if vertical_fov is None:
        return
    lower, upper = vertical_fov

    cameras = list(world.debug_cameras(require_camera=True))
    forwards = [entity.transform.forward() for entity in cameras]
    for entity, forward in zip(cameras, forwards):
        if is_parallel(forward, Y):
            raise ValueError(f"{entity} looks straight along the world up axis; its pitch is undefined.")

    for entity, forward in zip(cameras, forwards):
        transform = entity.transform
        theta = signed_pitch(forward)
        if lower <= theta <= upper:
            continue

        flat_forward = normalize(np.array([forward[0], 0.0, forward[2]]))
        theta_in_fov = float(np.clip(theta, lower, upper))
        rotation = quat_from_axis_angle(transform.left(), theta_in_fov)
        transform.look_to(quat_rotate(rotation, flat_forward), Y)
