import itertools
from .camera import DebugCamera
from .input import FrameInput
from .options import DebugCameraOptions

PRIMARY_WINDOW = 'primary'

class Window:
    """A display surface that scroll events can target."""
    def __init__(self, id, primary: bool = False):
        self.id = id
        self.primary = primary

class Camera:
    """
    A rendering camera.

    Args:
        projection: A `PerspectiveProjection` or `OrthographicProjection`.
        target (optional): Where the camera renders to. `PRIMARY_WINDOW`, a
            window id, or None for off-screen targets. Defaults to `PRIMARY_WINDOW`.
    """
    def __init__(self, projection, target=PRIMARY_WINDOW):
        self.projection = projection
        self.target = target

class Time:
    """Frame clock."""
    def __init__(self):
        self.delta_seconds = 0.0
        self.elapsed_seconds = 0.0

    def advance(self, delta_seconds: float):
        if delta_seconds < 0:
            raise ValueError(f"Frame time cannot go backwards, got {delta_seconds}.")
        self.delta_seconds = float(delta_seconds)
        self.elapsed_seconds += self.delta_seconds

class Entity:
    _ids = itertools.count()

    def __init__(self, transform=None, camera: Camera = None, debug_camera: DebugCamera = None):
        self.id = next(Entity._ids)
        self.transform = transform
        self.camera = camera
        self.debug_camera = debug_camera

    def __repr__(self):
        return f"Entity({self.id})"

class World:
    """Entities, windows, shared options and the current frame's input."""
    def __init__(self, options: DebugCameraOptions = None):
        self.options = options if options is not None else DebugCameraOptions()
        self.entities = []
        self.windows = {}
        self.input = FrameInput()
        self.time = Time()

    # --- Windows ---

    def add_window(self, window: Window) -> Window:
        if window.primary and self._find_primary() is not None:
            raise ValueError("There can only be one primary window.")
        self.windows[window.id] = window
        return window

    def _find_primary(self):
        for window in self.windows.values():
            if window.primary:
                return window
        return None

    @property
    def primary_window(self) -> Window:
        window = self._find_primary()
        if window is None:
            raise RuntimeError("There should be exactly one primary window, found none.")
        return window

    def resolve_window(self, target):
        """Returns the concrete window id a render target points at, or None for non-window targets."""
        if target is None:
            return None
        if target == PRIMARY_WINDOW:
            return self.primary_window.id
        return target

    # --- Entities ---

    def spawn(self, transform=None, camera: Camera = None, debug_camera: DebugCamera = None) -> Entity:
        if debug_camera is not None:
            debug_camera.on_attach(transform, self.options)
        entity = Entity(transform=transform, camera=camera, debug_camera=debug_camera)
        self.entities.append(entity)
        return entity

    def insert_debug_camera(self, entity: Entity, debug_camera: DebugCamera = None) -> DebugCamera:
        """Adds a marker to an existing entity."""
        debug_camera = debug_camera if debug_camera is not None else DebugCamera()
        debug_camera.on_attach(entity.transform, self.options)
        entity.debug_camera = debug_camera
        return debug_camera

    def despawn(self, entity: Entity):
        self.entities.remove(entity)
        entity.debug_camera = None

    def debug_cameras(self, require_camera: bool = False):
        """Yields entities with an enabled marker and a transform."""
        for entity in self.entities:
            marker = entity.debug_camera
            if marker is None or not marker.enabled or entity.transform is None:
                continue
            if require_camera and entity.camera is None:
                continue
            yield entity
