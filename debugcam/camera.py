import numpy as np
from .transform import Transform

class DebugCamera:
    """
    Marks an entity as controlled by the debug camera routines.

    Attach it next to a `Transform` (and a `Camera` for zooming and vertical
    clamping) when spawning the entity.

    Example:
        >>> world.spawn(
        ...     transform=Transform.from_xyz(-2.5, 4.5, 9.0).looking_at((0, 0, 0)),
        ...     camera=Camera(PerspectiveProjection()),
        ...     debug_camera=DebugCamera(),
        ... )
    """
    def __init__(self, enabled: bool = True, anchor=None):
        """
        Args:
            enabled (bool, optional): Per-camera switch, only effective while the
                debug camera is enabled globally. Defaults to True.
            anchor (tuple, optional): A focus point for the camera. Stored but
                not used by the current movement scheme.
        """
        self.enabled = enabled
        self.anchor = None if anchor is None else np.array(anchor, dtype=float)
        self.origin = None
        self.magnification = 1.0
        self.fast_movement = False

    def on_attach(self, transform: Transform, options):
        """
        Runs once, when the marker is added to an entity.

        Remembers a copy of `transform` as `origin` if the options ask for it.
        """
        if not options.remember_original_transform:
            return
        if transform is None:
            raise ValueError("Added 'DebugCamera' to an entity without a 'Transform' while "
                             "'remember_original_transform' is enabled.")
        self.origin = transform.copy()

    def restore_origin(self, transform: Transform) -> bool:
        """Moves `transform` back to the remembered origin. Returns False if there is none."""
        if self.origin is None:
            return False
        transform.translation = self.origin.translation.copy()
        transform.rotation = self.origin.rotation.copy()
        return True

    def __repr__(self):
        return f"DebugCamera(enabled={self.enabled}, magnification={self.magnification:.3f})"
