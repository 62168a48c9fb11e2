"""
rigidpose - Rigid-body pose primitives for visual-inertial odometry.

This package provides a quaternion/translation pose value type with a sensor
time offset, pose composition and inversion, and weighted pose averaging.
"""

from rigidpose.version import __version__
from rigidpose.pose import (
    MeanPoseError,
    Odometry,
    Pose,
    WeightedPose,
    compute_mean_pose,
    pose_transform,
)
from rigidpose.utils.math3d import DegenerateQuaternionError

__all__ = [
    "__version__",
    "DegenerateQuaternionError",
    "MeanPoseError",
    "Odometry",
    "Pose",
    "WeightedPose",
    "compute_mean_pose",
    "pose_transform",
]
