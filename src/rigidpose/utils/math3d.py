"""
3D math utilities for rigidpose.

Provides quaternion algebra, rotation conversions and homogeneous transform
helpers. Quaternions are stored as float64 arrays in [w, x, y, z] order.
"""

import numpy as np
from numpy.typing import NDArray

QUATERNION_EPS = 1e-12


class DegenerateQuaternionError(ValueError):
    """Quaternion has (near) zero norm and cannot represent a rotation."""

    pass


def quaternion_to_rotation_matrix(q: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert unit quaternion to rotation matrix.

    Args:
        q: Quaternion [w, x, y, z].

    Returns:
        3x3 rotation matrix.
    """
    w, x, y, z = q[0], q[1], q[2], q[3]

    R = np.array(
        [
            [1 - 2 * (y**2 + z**2), 2 * (x * y - z * w), 2 * (x * z + y * w)],
            [2 * (x * y + z * w), 1 - 2 * (x**2 + z**2), 2 * (y * z - x * w)],
            [2 * (x * z - y * w), 2 * (y * z + x * w), 1 - 2 * (x**2 + y**2)],
        ],
        dtype=np.float64,
    )

    return R


def rotation_matrix_to_quaternion(R: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert rotation matrix to quaternion.

    Args:
        R: 3x3 rotation matrix.

    Returns:
        Quaternion [w, x, y, z].
    """
    trace = np.trace(R)

    if trace > 0:
        s = 0.5 / np.sqrt(trace + 1.0)
        w = 0.25 / s
        x = (R[2, 1] - R[1, 2]) * s
        y = (R[0, 2] - R[2, 0]) * s
        z = (R[1, 0] - R[0, 1]) * s
    elif R[0, 0] > R[1, 1] and R[0, 0] > R[2, 2]:
        s = 2.0 * np.sqrt(1.0 + R[0, 0] - R[1, 1] - R[2, 2])
        w = (R[2, 1] - R[1, 2]) / s
        x = 0.25 * s
        y = (R[0, 1] + R[1, 0]) / s
        z = (R[0, 2] + R[2, 0]) / s
    elif R[1, 1] > R[2, 2]:
        s = 2.0 * np.sqrt(1.0 + R[1, 1] - R[0, 0] - R[2, 2])
        w = (R[0, 2] - R[2, 0]) / s
        x = (R[0, 1] + R[1, 0]) / s
        y = 0.25 * s
        z = (R[1, 2] + R[2, 1]) / s
    else:
        s = 2.0 * np.sqrt(1.0 + R[2, 2] - R[0, 0] - R[1, 1])
        w = (R[1, 0] - R[0, 1]) / s
        x = (R[0, 2] + R[2, 0]) / s
        y = (R[1, 2] + R[2, 1]) / s
        z = 0.25 * s

    return np.array([w, x, y, z], dtype=np.float64)


def normalize_quaternion(q: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Scale a quaternion to unit norm.

    Args:
        q: Quaternion [w, x, y, z].

    Returns:
        Unit quaternion with the same direction.

    Raises:
        DegenerateQuaternionError: If the quaternion norm is (near) zero.
    """
    q = np.asarray(q, dtype=np.float64).flatten()
    if q.shape != (4,):
        raise ValueError(f"Expected 4-element quaternion, got shape {q.shape}")

    norm = np.linalg.norm(q)
    if not np.isfinite(norm) or norm < QUATERNION_EPS:
        raise DegenerateQuaternionError(f"Cannot normalize quaternion {q.tolist()}")
    return q / norm


def quaternion_multiply(
    q1: NDArray[np.float64], q2: NDArray[np.float64]
) -> NDArray[np.float64]:
    """
    Hamilton product q1 * q2.

    The result rotates by q2 first, then by q1.
    """
    w1, x1, y1, z1 = q1
    w2, x2, y2, z2 = q2

    return np.array(
        [
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        ],
        dtype=np.float64,
    )


def quaternion_conjugate(q: NDArray[np.float64]) -> NDArray[np.float64]:
    """Return conjugate [w, -x, -y, -z]."""
    return np.array([q[0], -q[1], -q[2], -q[3]], dtype=np.float64)


def quaternion_inverse(q: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Multiplicative inverse of a quaternion.

    Equal to the conjugate for unit quaternions.

    Raises:
        DegenerateQuaternionError: If the quaternion norm is (near) zero.
    """
    norm_sq = float(np.dot(q, q))
    if norm_sq < QUATERNION_EPS**2:
        raise DegenerateQuaternionError("Cannot invert zero quaternion")
    return quaternion_conjugate(q) / norm_sq


def rotate_vector(
    q: NDArray[np.float64], v: NDArray[np.float64]
) -> NDArray[np.float64]:
    """
    Rotate a 3D vector by a unit quaternion.

    Args:
        q: Unit quaternion [w, x, y, z].
        v: 3-element vector.

    Returns:
        Rotated vector.
    """
    return quaternion_to_rotation_matrix(q) @ np.asarray(v, dtype=np.float64)


def make_transform(
    R: NDArray[np.float64], t: NDArray[np.float64]
) -> NDArray[np.float64]:
    """
    Build a 4x4 homogeneous transform.

    Args:
        R: 3x3 rotation block.
        t: 3-element translation column.

    Returns:
        4x4 matrix with bottom row [0, 0, 0, 1].
    """
    T = np.eye(4, dtype=np.float64)
    T[:3, :3] = R
    T[:3, 3] = t
    return T


def split_transform(
    T: NDArray[np.float64],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Read rotation block and translation column from a homogeneous transform.

    Returns:
        Tuple of (3x3 rotation, 3-element translation), both copies.
    """
    T = np.asarray(T, dtype=np.float64)
    if T.shape != (4, 4):
        raise ValueError(f"Expected 4x4 transform, got shape {T.shape}")
    return T[:3, :3].copy(), T[:3, 3].copy()


def rotation_matrix_to_euler(R: NDArray[np.float64]) -> tuple[float, float, float]:
    """
    Convert rotation matrix to Euler angles (roll, pitch, yaw).

    Uses ZYX convention (yaw-pitch-roll).

    Args:
        R: 3x3 rotation matrix.

    Returns:
        Tuple of (roll, pitch, yaw) in radians.
    """
    sy = np.sqrt(R[0, 0] ** 2 + R[1, 0] ** 2)

    singular = sy < 1e-6

    if not singular:
        roll = np.arctan2(R[2, 1], R[2, 2])
        pitch = np.arctan2(-R[2, 0], sy)
        yaw = np.arctan2(R[1, 0], R[0, 0])
    else:
        roll = np.arctan2(-R[1, 2], R[1, 1])
        pitch = np.arctan2(-R[2, 0], sy)
        yaw = 0.0

    return float(roll), float(pitch), float(yaw)


def euler_to_rotation_matrix(
    roll: float, pitch: float, yaw: float
) -> NDArray[np.float64]:
    """
    Convert Euler angles to rotation matrix.

    Uses ZYX convention (yaw-pitch-roll).

    Args:
        roll: Roll angle in radians.
        pitch: Pitch angle in radians.
        yaw: Yaw angle in radians.

    Returns:
        3x3 rotation matrix.
    """
    cr, sr = np.cos(roll), np.sin(roll)
    cp, sp = np.cos(pitch), np.sin(pitch)
    cy, sy = np.cos(yaw), np.sin(yaw)

    Rx = np.array([[1.0, 0.0, 0.0], [0.0, cr, -sr], [0.0, sr, cr]])
    Ry = np.array([[cp, 0.0, sp], [0.0, 1.0, 0.0], [-sp, 0.0, cp]])
    Rz = np.array([[cy, -sy, 0.0], [sy, cy, 0.0], [0.0, 0.0, 1.0]])

    return Rz @ Ry @ Rx
