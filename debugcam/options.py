import copy
import numpy as np
from .input import KeyCode

TAU = 2.0 * np.pi

class KeyBindings:
    """
    One optional key per movement action.

    Any binding may be `None`, which makes that action unreachable from the
    keyboard.
    """
    ACTIONS = ('forward', 'back', 'left', 'right', 'up', 'down', 'global_up', 'global_down', 'fast_movement')

    def __init__(self, forward=None, back=None, left=None, right=None, up=None, down=None,
                 global_up=None, global_down=None, fast_movement=None):
        self.forward = forward
        self.back = back
        self.left = left
        self.right = right
        self.up = up
        self.down = down
        self.global_up = global_up
        self.global_down = global_down
        self.fast_movement = fast_movement

    @classmethod
    def empty(cls) -> 'KeyBindings':
        return cls()

    @classmethod
    def default(cls) -> 'KeyBindings':
        """WASD to move, Q/E for local up/down, R/F for world up/down, Shift to go fast."""
        return cls(
            forward=KeyCode.W, back=KeyCode.S, left=KeyCode.A, right=KeyCode.D,
            up=KeyCode.Q, down=KeyCode.E,
            global_up=KeyCode.R, global_down=KeyCode.F,
            fast_movement=KeyCode.LEFT_SHIFT,
        )

    def as_dict(self) -> dict:
        return {action: getattr(self, action) for action in self.ACTIONS}

    def __repr__(self):
        bound = ", ".join(f"{a}={k.name if isinstance(k, KeyCode) else k}" for a, k in self.as_dict().items() if k is not None)
        return f"KeyBindings({bound})"

class InputOptions:
    """
    Keyboard configuration.

    Args:
        keybindings (KeyBindings, optional): Defaults to no bindings at all.
        sticky_fast_movement (bool, optional): When True, each press of the
            fast-movement key toggles fast movement on or off. When False,
            fast movement is active only while the key is held.
    """
    def __init__(self, keybindings: KeyBindings = None, sticky_fast_movement: bool = False):
        self.keybindings = keybindings if keybindings is not None else KeyBindings.empty()
        self.sticky_fast_movement = sticky_fast_movement

class DebugCameraOptions:
    """
    Settings shared by every debug camera.

    The per-frame routines only read these; change them between frames.

    Args:
        enabled (bool): Global switch. Cameras can still be disabled one by
            one while this is on, but not the other way around. Defaults to False.
        remember_original_transform (bool): Snapshot each camera's transform
            into `DebugCamera.origin` when the marker is attached. Defaults to True.
        force_y_up_direction (bool): Re-level the camera's up vector after every
            pointer rotation so no roll accumulates. Defaults to True.
        movement_speed (float): Base speed in meters per second. Defaults to 2.0.
        fast_movement_speed (float): Speed while fast movement is active.
            Defaults to 3.0.
        turning_speed (tuple): Radians per second per pointer unit, horizontal
            and vertical. The sign controls the turning direction.
            Defaults to 6 degrees both ways, `(-TAU / 60, -TAU / 60)`.
        zoom_intensity (float): Magnification change per 100 scroll units.
            Defaults to 2.0.
        zoom_range (tuple): Inclusive (min, max) magnification. The minimum
            must be strictly positive. Defaults to (0.1, 100.0).
        vertical_fov (tuple or None): Inclusive range of signed pitch angles
            in radians, zero being level. Looking outside it is clamped back.
            None disables clamping. Defaults to 45 degrees up and down.
        input_options (InputOptions): Keyboard configuration. Defaults to no
            key bindings.
        verbose (bool): Print a line when fast movement is toggled.
    """
    def __init__(self, enabled=False, remember_original_transform=True, force_y_up_direction=True,
                 movement_speed=2.0, fast_movement_speed=3.0, turning_speed=(-TAU / 60.0, -TAU / 60.0),
                 zoom_intensity=2.0, zoom_range=(0.1, 100.0), vertical_fov=(-np.pi / 4, np.pi / 4),
                 input_options: InputOptions = None, verbose=False):
        self.enabled = enabled
        self.remember_original_transform = remember_original_transform
        self.force_y_up_direction = force_y_up_direction
        self.movement_speed = float(movement_speed)
        self.fast_movement_speed = float(fast_movement_speed)
        self.turning_speed = np.array(turning_speed, dtype=float)
        self.zoom_intensity = float(zoom_intensity)
        self.zoom_range = (float(zoom_range[0]), float(zoom_range[1]))
        self.vertical_fov = None if vertical_fov is None else (float(vertical_fov[0]), float(vertical_fov[1]))
        self.input_options = input_options if input_options is not None else InputOptions()
        self.verbose = verbose
        self._validate()

    def _validate(self):
        if self.turning_speed.shape != (2,):
            raise ValueError(f"turning_speed needs a horizontal and a vertical component, got {self.turning_speed.tolist()}.")
        if self.movement_speed < 0 or self.fast_movement_speed < 0:
            raise ValueError("Movement speeds cannot be negative.")
        lo, hi = self.zoom_range
        if lo <= 0:
            raise ValueError(f"The minimum of zoom_range must be strictly positive, got {lo}.")
        if lo > hi:
            raise ValueError(f"zoom_range minimum {lo} exceeds its maximum {hi}.")
        if self.vertical_fov is not None and self.vertical_fov[0] > self.vertical_fov[1]:
            raise ValueError(f"vertical_fov start {self.vertical_fov[0]} exceeds its end {self.vertical_fov[1]}.")

    @classmethod
    def default_with_keybindings(cls, **kwargs) -> 'DebugCameraOptions':
        """Default options with the conventional WASD layout bound."""
        kwargs.setdefault('input_options', InputOptions(keybindings=KeyBindings.default()))
        return cls(**kwargs)

    @property
    def keybindings(self) -> KeyBindings:
        return self.input_options.keybindings

    def copy(self) -> 'DebugCameraOptions':
        return copy.deepcopy(self)
