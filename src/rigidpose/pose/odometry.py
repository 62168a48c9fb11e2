"""
Odometry record models for rigidpose.

Mirrors the layout of ROS ``nav_msgs/Odometry`` so that records exported from
a VIO front end (or the ROS messages themselves) can seed a Pose.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from rigidpose.utils.io import load_yaml


class Header(BaseModel):
    """Message header."""

    stamp: float = Field(default=0.0, description="Timestamp in seconds")
    frame_id: str = Field(default="", description="Parent frame identifier")


class Point(BaseModel):
    """Position in meters."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class Quaternion(BaseModel):
    """Orientation quaternion (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


class PoseMsg(BaseModel):
    """Position and orientation pair."""

    position: Point = Field(default_factory=Point)
    orientation: Quaternion = Field(default_factory=Quaternion)


class PoseWithCovariance(BaseModel):
    """Pose with row-major 6x6 covariance."""

    pose: PoseMsg = Field(default_factory=PoseMsg)
    covariance: list[float] = Field(default_factory=lambda: [0.0] * 36)

    @field_validator("covariance")
    @classmethod
    def check_covariance_size(cls, v: list[float]) -> list[float]:
        """Covariance must hold 36 entries."""
        if len(v) != 36:
            raise ValueError("covariance must have 36 elements")
        return v


class Odometry(BaseModel):
    """Odometry record (nav_msgs/Odometry layout, without twist)."""

    header: Header = Field(default_factory=Header)
    child_frame_id: str = Field(default="", description="Child frame identifier")
    pose: PoseWithCovariance = Field(default_factory=PoseWithCovariance)

    model_config = {"extra": "ignore"}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Odometry":
        """Build an Odometry record from a plain mapping."""
        return cls.model_validate(data)


def load_odometry(path: Path) -> Odometry:
    """
    Load an odometry record from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Validated Odometry record.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the record is malformed.
    """
    return Odometry.from_dict(load_yaml(path))
