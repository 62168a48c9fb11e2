"""
Shared pytest fixtures for rigidpose tests.
"""

import logging
from typing import Iterator

import numpy as np
import pytest
import structlog

from rigidpose.pose.odometry import Odometry
from rigidpose.pose.transform import Pose


def random_quaternion(rng: np.random.Generator) -> np.ndarray:
    """Draw a uniformly random unit quaternion [w, x, y, z]."""
    q = rng.normal(size=4)
    return q / np.linalg.norm(q)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore default logging configuration after each test."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def identity_pose() -> Pose:
    """Identity pose."""
    return Pose()


@pytest.fixture
def yaw_90_pose() -> Pose:
    """90 degree rotation about Z with translation (1, 2, 3)."""
    s = np.sqrt(0.5)
    return Pose([s, 0.0, 0.0, s], [1.0, 2.0, 3.0], 0.01)


@pytest.fixture
def random_poses(rng: np.random.Generator) -> list[Pose]:
    """Three random poses."""
    return [
        Pose(random_quaternion(rng), rng.uniform(-5.0, 5.0, size=3))
        for _ in range(3)
    ]


@pytest.fixture
def odometry_record() -> Odometry:
    """Odometry record with identity orientation at (1, 2, 3)."""
    return Odometry.from_dict(
        {
            "header": {"stamp": 12.5, "frame_id": "world"},
            "child_frame_id": "imu",
            "pose": {
                "pose": {
                    "position": {"x": 1.0, "y": 2.0, "z": 3.0},
                    "orientation": {"x": 0.0, "y": 0.0, "z": 0.0, "w": 1.0},
                }
            },
        }
    )
