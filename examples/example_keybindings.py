from debugcam import *

def main():
    """
    Drives a debug camera headlessly with custom bindings.

    This example shows how to:
    - Build `DebugCameraOptions` with your own `KeyBindings`, leaving some
      actions unbound.
    - Use sticky fast movement, where each press of the fast key toggles it.
    - Script input directly into `world.input` instead of reading a window.
    """
    bindings = KeyBindings(
        forward=KeyCode.UP, back=KeyCode.DOWN,
        left=KeyCode.LEFT, right=KeyCode.RIGHT,
        fast_movement=KeyCode.SPACE,
    )
    options = DebugCameraOptions(
        enabled=True,
        movement_speed=1.0,
        fast_movement_speed=4.0,
        zoom_range=(0.5, 4.0),
        input_options=InputOptions(bindings, sticky_fast_movement=True),
        verbose=True,
    )

    app = App().add_plugins(DebugCameraPlugin(options))
    app.world.add_window(Window(0, primary=True))
    camera = app.world.spawn(
        transform=Transform.from_xyz(0, 1, 5),
        camera=Camera(OrthographicProjection(scale=2.0)),
        debug_camera=DebugCamera(),
    )
    keys = app.world.input.keys

    # One second forward at base speed.
    keys.press(KeyCode.UP)
    app.update(1.0)

    # Tap space: fast movement stays on after release.
    keys.press(KeyCode.SPACE)
    keys.release(KeyCode.SPACE)
    app.update(1.0)

    # Turn a little and zoom in.
    keys.release(KeyCode.UP)
    app.world.input.add_mouse_motion(5.0, 0.0)
    app.world.input.add_mouse_wheel(0, -25.0)
    app.update(0.5)

    print(f"INFO: {camera.transform}")
    print(f"INFO: {camera.camera.projection}, magnification={camera.debug_camera.magnification:.2f}")

    camera.debug_camera.restore_origin(camera.transform)
    print(f"INFO: Back at origin: {camera.transform}")
    return camera

if __name__ == "__main__":
    main()
