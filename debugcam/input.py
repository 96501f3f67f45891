import sys
from enum import IntEnum
import numpy as np

class KeyCode(IntEnum):
    """Logical keys. Values match the glfw key constants so raw glfw codes can be used directly."""
    SPACE = 32
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    ESCAPE = 256
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346

class ButtonInput:
    """Current press state of every key, plus the edges seen during this frame."""
    def __init__(self):
        self._pressed = set()
        self._just_pressed = set()
        self._just_released = set()

    def press(self, key):
        if key not in self._pressed:
            self._just_pressed.add(key)
        self._pressed.add(key)

    def release(self, key):
        if key in self._pressed:
            self._pressed.discard(key)
            self._just_released.add(key)

    def pressed(self, key) -> bool: return key in self._pressed
    def just_pressed(self, key) -> bool: return key in self._just_pressed
    def just_released(self, key) -> bool: return key in self._just_released

    def clear(self):
        """Forgets this frame's edges; held keys stay pressed."""
        self._just_pressed.clear()
        self._just_released.clear()

    def reset_all(self):
        self._pressed.clear()
        self.clear()

class MouseWheel:
    """A scroll event targeted at a window."""
    def __init__(self, window, y: float, x: float = 0.0):
        self.window = window
        self.y = float(y)
        self.x = float(x)

    def __repr__(self):
        return f"MouseWheel(window={self.window!r}, y={self.y})"

class FrameInput:
    """Input accumulated since the last frame ended."""
    def __init__(self):
        self.mouse_motion = []
        self.mouse_wheel = []
        self.keys = ButtonInput()

    def add_mouse_motion(self, dx: float, dy: float):
        self.mouse_motion.append((float(dx), float(dy)))

    def add_mouse_wheel(self, window, y: float, x: float = 0.0):
        self.mouse_wheel.append(MouseWheel(window, y, x))

    def motion_delta(self) -> np.ndarray:
        """Sum of all pointer motion this frame."""
        if not self.mouse_motion:
            return np.zeros(2)
        return np.sum(np.array(self.mouse_motion, dtype=float), axis=0)

    def scroll_events_for(self, window) -> list:
        return [mw for mw in self.mouse_wheel if mw.window == window]

    def end_frame(self):
        self.mouse_motion.clear()
        self.mouse_wheel.clear()
        self.keys.clear()

class GlfwInput:
    """
    Feeds a `FrameInput` from a glfw window's callbacks.

    Cursor positions become motion deltas, vertical scroll offsets become
    `MouseWheel` events tagged with `window_id`, and key actions update the
    key state. Key repeats are ignored so that `just_pressed` stays an edge.
    """
    def __init__(self, window, window_id=0, frame_input: FrameInput = None, capture_cursor=False):
        try:
            import glfw
        except ImportError:
            print("ERROR: The glfw input adapter requires 'glfw'. Run 'pip install glfw'.", file=sys.stderr)
            raise
        self._glfw = glfw
        self.window = window
        self.window_id = window_id
        self.frame_input = frame_input if frame_input is not None else FrameInput()
        self._last_cursor = None

        glfw.set_cursor_pos_callback(window, self._on_cursor_pos)
        glfw.set_scroll_callback(window, self._on_scroll)
        glfw.set_key_callback(window, self._on_key)
        if capture_cursor:
            glfw.set_input_mode(window, glfw.CURSOR, glfw.CURSOR_DISABLED)

    def _on_cursor_pos(self, window, x, y):
        if self._last_cursor is not None:
            lx, ly = self._last_cursor
            self.frame_input.add_mouse_motion(x - lx, y - ly)
        self._last_cursor = (x, y)

    def _on_scroll(self, window, x_offset, y_offset):
        self.frame_input.add_mouse_wheel(self.window_id, y_offset, x_offset)

    def _on_key(self, window, key, scancode, action, mods):
        if action == self._glfw.PRESS:
            self.frame_input.keys.press(key)
        elif action == self._glfw.RELEASE:
            self.frame_input.keys.release(key)
