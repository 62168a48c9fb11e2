"""Unit tests for pose record files."""

from pathlib import Path

import numpy as np
import pytest
from numpy.testing import assert_array_almost_equal
from pydantic import ValidationError

from rigidpose.pose.records import (
    PoseRecord,
    SampleSet,
    load_pose,
    load_samples,
    save_pose,
)
from rigidpose.pose.transform import Pose
from rigidpose.utils.io import save_yaml


class TestPoseRecord:
    """Tests for PoseRecord."""

    def test_defaults_to_identity(self) -> None:
        """Test empty record is the identity pose."""
        assert PoseRecord().to_pose() == Pose()

    def test_to_pose(self) -> None:
        """Test field mapping."""
        record = PoseRecord(
            translation=[1.0, 2.0, 3.0],
            quaternion_wxyz=[0.0, 0.0, 0.0, 2.0],
            time_offset=0.25,
        )
        pose = record.to_pose()
        assert_array_almost_equal(pose.orientation, [0.0, 0.0, 0.0, 1.0])
        assert pose.time_offset == 0.25

    def test_wrong_lengths(self) -> None:
        """Test element count checks."""
        with pytest.raises(ValidationError):
            PoseRecord(translation=[1.0, 2.0])
        with pytest.raises(ValidationError):
            PoseRecord(quaternion_wxyz=[1.0, 0.0, 0.0])

    def test_unknown_field(self) -> None:
        """Test unknown keys are rejected."""
        with pytest.raises(ValidationError):
            PoseRecord(rotation=[1.0, 0.0, 0.0, 0.0])

    def test_save_and_load(self, tmp_path: Path, yaw_90_pose: Pose) -> None:
        """Test a saved pose loads back unchanged."""
        path = tmp_path / "out" / "pose.yaml"
        save_pose(yaw_90_pose, path)

        loaded = load_pose(path)

        assert loaded.is_close(yaw_90_pose)
        assert loaded.time_offset == pytest.approx(0.01)


class TestSampleSet:
    """Tests for SampleSet."""

    def test_default_weight(self) -> None:
        """Test weight defaults to one."""
        samples = SampleSet(samples=[{"translation": [1.0, 0.0, 0.0]}]).to_samples()
        assert samples[0].weight == 1.0

    def test_load_samples(self, tmp_path: Path) -> None:
        """Test loading a sample file."""
        path = tmp_path / "samples.yaml"
        save_yaml(
            {
                "samples": [
                    {"weight": 1.0, "translation": [0.0, 0.0, 0.0]},
                    {
                        "weight": 3.0,
                        "translation": [2.0, 0.0, 0.0],
                        "quaternion_wxyz": [
                            float(np.cos(0.1)),
                            0.0,
                            0.0,
                            float(np.sin(0.1)),
                        ],
                    },
                ]
            },
            path,
        )

        samples = load_samples(path)

        assert [s.weight for s in samples] == [1.0, 3.0]
        assert_array_almost_equal(samples[1].pose.translation, [2.0, 0.0, 0.0])
