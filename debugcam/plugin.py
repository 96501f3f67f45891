from .options import DebugCameraOptions
from .systems import (
    debug_camera_is_globally_enabled, vertical_clamp_is_configured,
    move_mouse_to_rotate, mouse_scroll_to_zoom, keyboard_input_to_movements,
    clamp_camera_rotation_vertically,
)

class DebugCameraPlugin:
    """
    Installs the debug camera routines into an `App`.

    Rotation, zoom and movement run in the `update` stage. The vertical
    clamp runs in `post_update`, after rotation, and only when a
    `vertical_fov` range is configured. Everything is skipped while the
    options are globally disabled.

    Add the plugin before spawning cameras: attaching a `DebugCamera` reads
    the installed options.

    Example:
        >>> app = App().add_plugins(DebugCameraPlugin.new_with_keybindings().enable_by_default())
    """
    def __init__(self, options: DebugCameraOptions = None):
        self.options = options if options is not None else DebugCameraOptions()

    @classmethod
    def new_with_keybindings(cls) -> 'DebugCameraPlugin':
        return cls(DebugCameraOptions.default_with_keybindings())

    def enable_by_default(self) -> 'DebugCameraPlugin':
        self.options.enabled = True
        return self

    def build(self, app):
        app.world.options = self.options.copy()
        app.add_systems(
            'update',
            move_mouse_to_rotate,
            mouse_scroll_to_zoom,
            keyboard_input_to_movements,
            run_if=debug_camera_is_globally_enabled,
        )
        app.add_systems(
            'post_update',
            clamp_camera_rotation_vertically,
            run_if=(debug_camera_is_globally_enabled, vertical_clamp_is_configured),
        )
        state = "enabled" if self.options.enabled else "disabled"
        print(f"INFO: Debug camera installed ({state}).")
