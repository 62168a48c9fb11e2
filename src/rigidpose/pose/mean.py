"""
Weighted mean pose computation for rigidpose.

Translation is averaged as a weighted centroid. Rotation uses the linear
quaternion average, which is only accurate when all samples are close to
each other and share the same hemisphere (q and -q are not reconciled).

References:
    - Averaging quaternions and vectors:
      https://wiki.unity3d.com/index.php/Averaging_Quaternions_and_Vectors
    - Hartley et al., "Rotation Averaging", IJCV 2013.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Union

import numpy as np

from rigidpose.logging.setup import get_logger
from rigidpose.pose.transform import Pose

logger = get_logger(__name__)


class MeanPoseError(ValueError):
    """Mean pose is undefined for the given samples."""

    pass


@dataclass(frozen=True)
class WeightedPose:
    """
    Pose sample with its averaging weight.

    Attributes:
        weight: Non-negative weight (not validated).
        pose: The pose sample.
    """

    weight: float
    pose: Pose


SampleLike = Union[WeightedPose, tuple[float, Pose]]


def _as_sample(item: SampleLike) -> WeightedPose:
    if isinstance(item, WeightedPose):
        return item
    weight, pose = item
    return WeightedPose(weight=float(weight), pose=pose)


def compute_mean_pose(
    samples: Iterable[SampleLike],
    log_samples: bool = True,
    warn_on_hemisphere_flip: bool = True,
) -> Pose:
    """
    Compute the weighted mean of a set of poses.

    The quaternion components are averaged as a 4-vector and passed to the
    Pose constructor, which scales the result back to unit norm. No sign
    alignment is applied beforehand. The time offset of the result is zero.

    Args:
        samples: (weight, pose) pairs or WeightedPose items.
        log_samples: Log each sample at DEBUG level before averaging. Has no
            effect unless DEBUG is enabled for this module.
        warn_on_hemisphere_flip: Log a warning when a sample quaternion has
            negative dot product with the first one.

    Returns:
        Mean pose.

    Raises:
        MeanPoseError: If samples is empty or the weights sum to zero.
    """
    # TODO: replace the linear quaternion average with a pose-graph
    # optimization (argmin_T sum ||T_i - T||^2) once a least-squares backend
    # is available.
    items = [_as_sample(s) for s in samples]
    if not items:
        raise MeanPoseError("Cannot compute mean pose of empty sample set")

    weights = np.array([s.weight for s in items], dtype=np.float64)
    weight_total = float(weights.sum())
    if weight_total == 0.0:
        raise MeanPoseError("Sample weights sum to zero")

    translations = np.stack([s.pose.translation for s in items])
    quaternions = np.stack([s.pose.orientation for s in items])

    # Sample lines are formatted only when DEBUG is enabled for this module
    if log_samples and logging.getLogger(__name__).isEnabledFor(logging.DEBUG):
        for s in items:
            logger.debug("mean_pose_sample", weight=s.weight, pose=str(s.pose))

    if warn_on_hemisphere_flip:
        flipped = int(np.sum(quaternions @ quaternions[0] < 0.0))
        if flipped:
            logger.warning(
                "mean_pose_hemisphere_flip",
                flipped_samples=flipped,
                total_samples=len(items),
            )

    t_mean = weights @ translations / weight_total
    q_mean = weights @ quaternions / weight_total

    return Pose(q_mean, t_mean)
