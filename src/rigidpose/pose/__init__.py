"""Pose representation and averaging for rigidpose."""

from rigidpose.pose.transform import Pose, pose_transform
from rigidpose.pose.mean import MeanPoseError, WeightedPose, compute_mean_pose
from rigidpose.pose.odometry import Odometry, load_odometry

__all__ = [
    "Pose",
    "pose_transform",
    "MeanPoseError",
    "WeightedPose",
    "compute_mean_pose",
    "Odometry",
    "load_odometry",
]
