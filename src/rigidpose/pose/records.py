"""
Pose record files for rigidpose.

Plain YAML layouts used by the command-line tools:

    translation: [x, y, z]
    quaternion_wxyz: [w, x, y, z]
    time_offset: 0.0

and a sample set for averaging:

    samples:
      - weight: 1.0
        translation: [x, y, z]
        quaternion_wxyz: [w, x, y, z]
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from rigidpose.pose.mean import WeightedPose
from rigidpose.pose.transform import Pose
from rigidpose.utils.io import load_yaml, save_yaml


class PoseRecord(BaseModel):
    """Serialized pose."""

    translation: list[float] = Field(default_factory=lambda: [0.0, 0.0, 0.0])
    quaternion_wxyz: list[float] = Field(
        default_factory=lambda: [1.0, 0.0, 0.0, 0.0]
    )
    time_offset: float = 0.0

    model_config = {"extra": "forbid"}

    @field_validator("translation")
    @classmethod
    def check_translation(cls, v: list[float]) -> list[float]:
        if len(v) != 3:
            raise ValueError("translation must have 3 elements")
        return v

    @field_validator("quaternion_wxyz")
    @classmethod
    def check_quaternion(cls, v: list[float]) -> list[float]:
        if len(v) != 4:
            raise ValueError("quaternion_wxyz must have 4 elements")
        return v

    def to_pose(self) -> Pose:
        """Build the Pose described by this record."""
        return Pose(self.quaternion_wxyz, self.translation, self.time_offset)

    @classmethod
    def from_pose(cls, pose: Pose) -> "PoseRecord":
        return cls(
            translation=pose.translation.tolist(),
            quaternion_wxyz=pose.orientation.tolist(),
            time_offset=pose.time_offset,
        )


class WeightedPoseRecord(PoseRecord):
    """Serialized pose sample with weight."""

    weight: float = 1.0

    def to_sample(self) -> WeightedPose:
        return WeightedPose(weight=self.weight, pose=self.to_pose())


class SampleSet(BaseModel):
    """Collection of weighted pose samples."""

    samples: list[WeightedPoseRecord] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    def to_samples(self) -> list[WeightedPose]:
        return [record.to_sample() for record in self.samples]


def load_pose(path: Path) -> Pose:
    """Load a single pose record from YAML."""
    return PoseRecord.model_validate(load_yaml(path)).to_pose()


def load_samples(path: Path) -> list[WeightedPose]:
    """Load weighted pose samples from YAML."""
    return SampleSet.model_validate(load_yaml(path)).to_samples()


def save_pose(pose: Pose, path: Path) -> None:
    """Write a pose record to YAML."""
    save_yaml(PoseRecord.from_pose(pose).model_dump(), path)
