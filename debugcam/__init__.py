from .linalg import X, Y, Z
from .transform import Transform
from .projection import PerspectiveProjection, OrthographicProjection
from .input import KeyCode, ButtonInput, MouseWheel, FrameInput, GlfwInput
from .options import DebugCameraOptions, InputOptions, KeyBindings
from .camera import DebugCamera
from .world import World, Entity, Camera, Window, Time, PRIMARY_WINDOW
from .app import App
from .plugin import DebugCameraPlugin
from .systems import (
    move_mouse_to_rotate, mouse_scroll_to_zoom, keyboard_input_to_movements,
    clamp_camera_rotation_vertically, force_camera_up_in_y_forward_plane, signed_pitch,
)
