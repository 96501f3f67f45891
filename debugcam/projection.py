import numpy as np

# Hard limits on the field of view, independent of the zoom range.
MIN_FOV = np.radians(1.0)
MAX_FOV = np.radians(180.0)

class PerspectiveProjection:
    """A field-of-view projection. `fov` is the vertical angle in radians."""
    def __init__(self, fov: float = np.pi / 4):
        self.fov = float(fov)

    def __repr__(self):
        return f"PerspectiveProjection(fov={np.degrees(self.fov):.2f}deg)"

class OrthographicProjection:
    """A scale-based projection. Larger scales show more of the scene."""
    def __init__(self, scale: float = 1.0):
        self.scale = float(scale)

    def __repr__(self):
        return f"OrthographicProjection(scale={self.scale:.3f})"
