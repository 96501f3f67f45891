import sys
from debugcam import *

def main():
    """
    Flies a debug camera around with the default key layout.

    This example shows how to:
    - Install the `DebugCameraPlugin` with WASD bindings, enabled from the start.
    - Spawn a camera entity carrying a `DebugCamera` marker.
    - Feed glfw input into the world with `GlfwInput` and step the `App`
      once per frame.

    Controls: mouse to look, scroll to zoom, W/A/S/D to move, Q/E for local
    up/down, R/F for world up/down, hold Left Shift to go faster, Esc to quit.
    """
    import glfw

    if not glfw.init():
        raise RuntimeError("Could not initialize GLFW")
    window = glfw.create_window(1280, 720, "debugcam", None, None)
    if not window:
        glfw.terminate()
        raise RuntimeError("Could not create GLFW window.")

    app = App().add_plugins(DebugCameraPlugin.new_with_keybindings().enable_by_default())
    app.world.add_window(Window(0, primary=True))
    GlfwInput(window, window_id=0, frame_input=app.world.input, capture_cursor=True)

    camera = app.world.spawn(
        transform=Transform.from_xyz(-2.5, 4.5, 9.0).looking_at((0, 0, 0)),
        camera=Camera(PerspectiveProjection()),
        debug_camera=DebugCamera(),
    )

    last_time = glfw.get_time()
    frame = 0
    while not glfw.window_should_close(window):
        glfw.poll_events()
        if app.world.input.keys.pressed(KeyCode.ESCAPE):
            glfw.set_window_should_close(window, True)

        now = glfw.get_time()
        app.update(now - last_time)
        last_time = now

        frame += 1
        if frame % 60 == 0:
            print(f"INFO: {camera.transform} {camera.camera.projection} magnification={camera.debug_camera.magnification:.2f}")
        glfw.swap_buffers(window)

    glfw.terminate()
    return camera

if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print(f"ERROR: Failed to launch window: {e}", file=sys.stderr)
        print("       This often happens due to missing drivers or a headless environment.", file=sys.stderr)
        print("       Try examples/example_keybindings.py, which needs no window.", file=sys.stderr)
