"""Utility modules for rigidpose."""

from rigidpose.utils.math3d import (
    DegenerateQuaternionError,
    normalize_quaternion,
    quaternion_inverse,
    quaternion_multiply,
    quaternion_to_rotation_matrix,
    rotation_matrix_to_euler,
    rotation_matrix_to_quaternion,
)
from rigidpose.utils.io import ensure_dir, load_yaml, save_yaml

__all__ = [
    "DegenerateQuaternionError",
    "normalize_quaternion",
    "quaternion_inverse",
    "quaternion_multiply",
    "quaternion_to_rotation_matrix",
    "rotation_matrix_to_euler",
    "rotation_matrix_to_quaternion",
    "ensure_dir",
    "load_yaml",
    "save_yaml",
]
