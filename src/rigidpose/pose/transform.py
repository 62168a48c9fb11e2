"""
Rigid-body pose value type for rigidpose.

A Pose holds a unit quaternion, a translation, the equivalent 4x4 homogeneous
transform and a scalar time offset between two sensor streams. Instances are
never mutated after construction; composition and inversion return new poses.
"""

from typing import Any, Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rigidpose.utils.math3d import (
    make_transform,
    normalize_quaternion,
    quaternion_inverse,
    quaternion_multiply,
    quaternion_to_rotation_matrix,
    rotate_vector,
    rotation_matrix_to_quaternion,
    split_transform,
)

IDENTITY_QUATERNION = np.array([1.0, 0.0, 0.0, 0.0], dtype=np.float64)


def _as_vector3(v: ArrayLike) -> NDArray[np.float64]:
    vec = np.asarray(v, dtype=np.float64).flatten()
    if vec.shape != (3,):
        raise ValueError(f"Expected 3-element translation, got shape {vec.shape}")
    return vec


class Pose:
    """
    Rigid transform (rotation + translation) with a time offset.

    The homogeneous transform is computed once at construction and kept
    consistent with the quaternion and translation.

    Attributes:
        orientation: Unit quaternion [w, x, y, z].
        translation: 3-element translation vector.
        transform: 4x4 homogeneous matrix.
        time_offset: Time offset in seconds (not part of the geometry).
    """

    __slots__ = ("_q", "_t", "_T", "_td")

    def __init__(
        self,
        orientation: Optional[ArrayLike] = None,
        translation: Optional[ArrayLike] = None,
        time_offset: float = 0.0,
    ) -> None:
        """
        Create a pose from a quaternion and translation.

        Args:
            orientation: Quaternion [w, x, y, z]; normalized on assignment.
                Identity if omitted.
            translation: Translation (x, y, z). Zero if omitted.
            time_offset: Time offset in seconds.

        Raises:
            DegenerateQuaternionError: If the quaternion has zero norm.
        """
        if orientation is None:
            q = IDENTITY_QUATERNION.copy()
        else:
            q = normalize_quaternion(np.asarray(orientation, dtype=np.float64))
        if translation is None:
            t = np.zeros(3, dtype=np.float64)
        else:
            t = _as_vector3(translation)
        T = make_transform(quaternion_to_rotation_matrix(q), t)
        self._set_state(q, t, T, time_offset)

    def _set_state(
        self,
        q: NDArray[np.float64],
        t: NDArray[np.float64],
        T: NDArray[np.float64],
        td: float,
    ) -> None:
        self._q = q
        self._t = t
        self._T = T
        self._td = float(td)

    @classmethod
    def _from_state(
        cls,
        q: NDArray[np.float64],
        t: NDArray[np.float64],
        T: NDArray[np.float64],
        td: float,
    ) -> "Pose":
        pose = cls.__new__(cls)
        pose._set_state(q, t, T, td)
        return pose

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls) -> "Pose":
        """Identity rotation, zero translation, zero time offset."""
        return cls()

    @classmethod
    def from_quaternion(
        cls,
        q_wxyz: ArrayLike,
        translation: ArrayLike,
        time_offset: float = 0.0,
    ) -> "Pose":
        """Create a pose from quaternion [w, x, y, z] and translation."""
        return cls(q_wxyz, translation, time_offset)

    @classmethod
    def from_rotation_matrix(
        cls,
        R: ArrayLike,
        translation: ArrayLike,
        time_offset: float = 0.0,
    ) -> "Pose":
        """
        Create a pose from a 3x3 rotation matrix and translation.

        The matrix is written into the transform block as given; the
        quaternion is derived from it and normalized.

        Args:
            R: 3x3 rotation matrix.
            translation: Translation (x, y, z).
            time_offset: Time offset in seconds.
        """
        R = np.asarray(R, dtype=np.float64)
        if R.shape != (3, 3):
            raise ValueError(f"Expected 3x3 rotation matrix, got shape {R.shape}")
        t = _as_vector3(translation)
        q = normalize_quaternion(rotation_matrix_to_quaternion(R))
        return cls._from_state(q, t, make_transform(R, t), time_offset)

    @classmethod
    def from_matrix(cls, T: ArrayLike, time_offset: float = 0.0) -> "Pose":
        """
        Create a pose from a 4x4 homogeneous transform.

        The matrix is stored as given; quaternion and translation are read
        from its blocks.

        Args:
            T: 4x4 homogeneous matrix.
            time_offset: Time offset in seconds.
        """
        T = np.array(T, dtype=np.float64)
        R, t = split_transform(T)
        q = normalize_quaternion(rotation_matrix_to_quaternion(R))
        return cls._from_state(q, t, T, time_offset)

    @classmethod
    def from_odometry(cls, odom: Any) -> "Pose":
        """
        Create a pose from an odometry record.

        Accepts any object laid out like ``nav_msgs/Odometry``
        (``odom.pose.pose.position`` / ``odom.pose.pose.orientation``).
        The record carries no time offset, so it is set to zero.
        """
        pose_msg = odom.pose.pose
        o = pose_msg.orientation
        p = pose_msg.position
        return cls([o.w, o.x, o.y, o.z], [p.x, p.y, p.z], 0.0)

    def copy(self) -> "Pose":
        """Return an exact duplicate of this pose."""
        return Pose._from_state(
            self._q.copy(), self._t.copy(), self._T.copy(), self._td
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def orientation(self) -> NDArray[np.float64]:
        """Unit quaternion [w, x, y, z]."""
        return self._q.copy()

    @property
    def translation(self) -> NDArray[np.float64]:
        """Translation (x, y, z)."""
        return self._t.copy()

    @property
    def transform(self) -> NDArray[np.float64]:
        """4x4 homogeneous transform."""
        return self._T.copy()

    @property
    def rotation_matrix(self) -> NDArray[np.float64]:
        """3x3 rotation block of the transform."""
        return self._T[:3, :3].copy()

    @property
    def time_offset(self) -> float:
        """Time offset in seconds."""
        return self._td

    # ------------------------------------------------------------------
    # Group operations
    # ------------------------------------------------------------------

    def compose(self, other: "Pose") -> "Pose":
        """
        Compose with another pose: T_out = self * other.

        t = t1 + q1 * t2, q = q1 * q2. The time offset is not carried over.
        """
        q = quaternion_multiply(self._q, other._q)
        t = rotate_vector(self._q, other._t) + self._t
        return Pose(q, t)

    def inverse(self) -> "Pose":
        """Return inverse pose. The time offset is not carried over."""
        q_inv = quaternion_inverse(self._q)
        return Pose(q_inv, -rotate_vector(q_inv, self._t))

    def __mul__(self, other: object) -> "Pose":
        if not isinstance(other, Pose):
            return NotImplemented
        return self.compose(other)

    def apply(self, point: ArrayLike) -> NDArray[np.float64]:
        """Apply transform to a point: p_out = R @ p_in + t."""
        return self._T[:3, :3] @ _as_vector3(point) + self._t

    # ------------------------------------------------------------------
    # Comparison and formatting
    # ------------------------------------------------------------------

    def is_close(self, other: "Pose", atol: float = 1e-9) -> bool:
        """
        Check geometric equality within tolerance.

        q and -q describe the same rotation and compare equal.
        """
        if not np.allclose(self._t, other._t, atol=atol):
            return False
        return bool(
            np.allclose(self._q, other._q, atol=atol)
            or np.allclose(self._q, -other._q, atol=atol)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pose):
            return NotImplemented
        return (
            np.array_equal(self._q, other._q)
            and np.array_equal(self._t, other._t)
            and np.array_equal(self._T, other._T)
            and self._td == other._td
        )

    def format(self, precision: int = 6) -> str:
        """
        Render as ``t: [x y z], q: [qx qy qz qw], td: value``.

        Intended for logs; there is no matching parser.
        """

        def fmt(v: float) -> str:
            # + 0.0 folds -0.0 into 0.0
            return f"{float(v) + 0.0:.{precision}g}"

        w, x, y, z = self._q
        t_str = " ".join(fmt(v) for v in self._t)
        q_str = " ".join(fmt(v) for v in (x, y, z, w))
        return f"t: [{t_str}], q: [{q_str}], td: {fmt(self._td)}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"Pose(orientation={self._q.tolist()}, translation={self._t.tolist()}, "
            f"time_offset={self._td})"
        )


def pose_transform(pose1: Pose, pose2: Pose) -> Pose:
    """
    Compose two poses: the result maps a point through pose2, then pose1.

    Equivalent to ``pose1.compose(pose2)``; the time offset is not propagated.
    """
    return pose1.compose(pose2)
