import numpy as np

X, Y, Z = np.array([1.0, 0.0, 0.0]), np.array([0.0, 1.0, 0.0]), np.array([0.0, 0.0, 1.0])

EPSILON = 1e-6

# --- Vectors ---

def vec3(v) -> np.ndarray:
    """Coerces a 3-sequence into a float vector."""
    v = np.array(v, dtype=float)
    if v.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {v.shape}.")
    return v

def normalize(v) -> np.ndarray:
    n = np.linalg.norm(v)
    if n == 0: raise ValueError("Cannot normalize a zero vector.")
    return np.asarray(v, dtype=float) / n

def project_onto_normalized(v, n) -> np.ndarray:
    """Projection of `v` onto the unit vector `n`."""
    return np.dot(v, n) * n

def reject_from_normalized(v, n) -> np.ndarray:
    """Component of `v` orthogonal to the unit vector `n`."""
    return v - project_onto_normalized(v, n)

def is_parallel(a, b, tol=EPSILON) -> bool:
    return np.linalg.norm(np.cross(a, b)) < tol

# --- Quaternions, stored as [x, y, z, w] ---

def quat_identity() -> np.ndarray:
    return np.array([0.0, 0.0, 0.0, 1.0])

def quat_normalize(q) -> np.ndarray:
    q = np.asarray(q, dtype=float)
    return q / np.linalg.norm(q)

def quat_from_axis_angle(axis, angle: float) -> np.ndarray:
    axis = normalize(axis)
    s = np.sin(angle * 0.5)
    return np.array([axis[0] * s, axis[1] * s, axis[2] * s, np.cos(angle * 0.5)])

def quat_mul(a, b) -> np.ndarray:
    """Hamilton product `a * b`; applying the result rotates by `b` first, then `a`."""
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return np.array([
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
        aw * bw - ax * bx - ay * by - az * bz,
    ])

def quat_rotate(q, v) -> np.ndarray:
    """Rotates vector `v` by unit quaternion `q`."""
    u, w = np.asarray(q[:3], dtype=float), q[3]
    t = 2.0 * np.cross(u, v)
    return np.asarray(v, dtype=float) + w * t + np.cross(u, t)

def quat_from_rotation_arc(a, b) -> np.ndarray:
    """
    The shortest rotation taking unit vector `a` onto unit vector `b`.

    Antiparallel inputs rotate half a turn about any axis orthogonal to `a`.
    """
    d = np.dot(a, b)
    if d < -1.0 + EPSILON:
        axis = np.cross(X, a)
        if np.linalg.norm(axis) < EPSILON:
            axis = np.cross(Y, a)
        return quat_from_axis_angle(axis, np.pi)
    c = np.cross(a, b)
    return quat_normalize(np.array([c[0], c[1], c[2], 1.0 + d]))

def quat_from_basis(right, up, back) -> np.ndarray:
    """Converts an orthonormal basis (the columns of a rotation matrix) into a quaternion."""
    m = np.column_stack((right, up, back))
    trace = m[0, 0] + m[1, 1] + m[2, 2]
    if trace > 0.0:
        s = np.sqrt(trace + 1.0) * 2.0
        q = [(m[2, 1] - m[1, 2]) / s, (m[0, 2] - m[2, 0]) / s, (m[1, 0] - m[0, 1]) / s, 0.25 * s]
    elif m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
        s = np.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2]) * 2.0
        q = [0.25 * s, (m[0, 1] + m[1, 0]) / s, (m[0, 2] + m[2, 0]) / s, (m[2, 1] - m[1, 2]) / s]
    elif m[1, 1] > m[2, 2]:
        s = np.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2]) * 2.0
        q = [(m[0, 1] + m[1, 0]) / s, 0.25 * s, (m[1, 2] + m[2, 1]) / s, (m[0, 2] - m[2, 0]) / s]
    else:
        s = np.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1]) * 2.0
        q = [(m[0, 2] + m[2, 0]) / s, (m[1, 2] + m[2, 1]) / s, 0.25 * s, (m[1, 0] - m[0, 1]) / s]
    return quat_normalize(q)

def signed_angle(a, b, normal) -> float:
    """Right-handed signed angle from `a` to `b` about `normal`."""
    return float(np.arctan2(np.dot(np.cross(a, b), normal), np.dot(a, b)))
