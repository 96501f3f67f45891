import numpy as np
from .linalg import (
    X, Y, Z, EPSILON, vec3, normalize, is_parallel,
    quat_identity, quat_normalize, quat_from_axis_angle, quat_mul, quat_rotate, quat_from_basis,
)

class Transform:
    """
    Position and orientation of an entity.

    The rotation is a unit quaternion `[x, y, z, w]`. Directions follow the
    usual right-handed camera convention: forward is -Z, right is +X and up
    is +Y in local space.
    """
    def __init__(self, translation=(0, 0, 0), rotation=None):
        self.translation = vec3(translation)
        self.rotation = quat_identity() if rotation is None else quat_normalize(rotation)

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> 'Transform':
        return cls(translation=(x, y, z))

    def copy(self) -> 'Transform':
        return Transform(self.translation.copy(), self.rotation.copy())

    def __repr__(self):
        t, r = self.translation, self.rotation
        return f"Transform(translation=({t[0]:.3f}, {t[1]:.3f}, {t[2]:.3f}), rotation=({r[0]:.3f}, {r[1]:.3f}, {r[2]:.3f}, {r[3]:.3f}))"

    # --- Directions ---

    def forward(self) -> np.ndarray: return quat_rotate(self.rotation, -Z)
    def back(self) -> np.ndarray: return quat_rotate(self.rotation, Z)
    def left(self) -> np.ndarray: return quat_rotate(self.rotation, -X)
    def right(self) -> np.ndarray: return quat_rotate(self.rotation, X)
    def up(self) -> np.ndarray: return quat_rotate(self.rotation, Y)
    def down(self) -> np.ndarray: return quat_rotate(self.rotation, -Y)

    # --- Rotation ---

    def rotate(self, rotation):
        """Applies `rotation` in world space, after the current orientation."""
        self.rotation = quat_normalize(quat_mul(rotation, self.rotation))

    def rotate_axis(self, axis, angle: float):
        self.rotate(quat_from_axis_angle(axis, angle))

    def rotate_y(self, angle: float):
        """Yaw about the world up axis."""
        self.rotate_axis(Y, angle)

    def rotate_local(self, rotation):
        """Applies `rotation` in local space, before the current orientation."""
        self.rotation = quat_normalize(quat_mul(self.rotation, rotation))

    def rotate_local_axis(self, axis, angle: float):
        self.rotate_local(quat_from_axis_angle(axis, angle))

    def rotate_local_x(self, angle: float):
        """Pitch about the transform's own right axis."""
        self.rotate_local_axis(X, angle)

    def look_to(self, direction, up=Y):
        """
        Orients the transform so that `forward()` points along `direction`
        and `up()` lies in the plane spanned by `direction` and `up`.
        """
        direction = vec3(direction)
        if np.linalg.norm(direction) < EPSILON:
            raise ValueError("Look direction cannot be the zero vector.")
        if is_parallel(direction, up):
            raise ValueError("Look direction cannot be parallel to the up reference.")
        back = normalize(-direction)
        right = normalize(np.cross(up, back))
        new_up = np.cross(back, right)
        self.rotation = quat_from_basis(right, new_up, back)

    def look_at(self, target, up=Y):
        self.look_to(vec3(target) - self.translation, up)

    def looking_at(self, target, up=Y) -> 'Transform':
        """Builder variant of `look_at`, returning `self`."""
        self.look_at(target, up)
        return self
