"""Unit tests for configuration schema and loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from rigidpose.config.loader import get_default_config, load_config, save_config
from rigidpose.config.schema import (
    LogLevel,
    MeanConfig,
    OutputConfig,
    ProjectConfig,
    RigidPoseConfig,
)
from rigidpose.config.validation import ConfigurationError, validate_config
from rigidpose.utils.io import save_yaml


class TestProjectConfig:
    """Tests for ProjectConfig."""

    def test_default_values(self) -> None:
        """Test default project configuration."""
        config = ProjectConfig()
        assert config.name == "rigidpose"
        assert config.log_level == LogLevel.INFO
        assert config.json_logs is False

    def test_auto_run_id(self) -> None:
        """Test auto-generated run ID."""
        config = ProjectConfig(run_id="auto")
        assert len(config.run_id) == 8
        assert config.run_id != "auto"

    def test_explicit_run_id(self) -> None:
        """Test explicit run ID."""
        config = ProjectConfig(run_id="vio-run-7")
        assert config.run_id == "vio-run-7"

    def test_invalid_log_level(self) -> None:
        """Test unknown log level is rejected."""
        with pytest.raises(ValidationError):
            ProjectConfig(log_level="TRACE")


class TestMeanAndOutputConfig:
    """Tests for MeanConfig and OutputConfig."""

    def test_mean_defaults(self) -> None:
        """Test default mean configuration."""
        config = MeanConfig()
        assert config.log_samples is True
        assert config.warn_on_hemisphere_flip is True

    def test_output_defaults(self) -> None:
        """Test default output configuration."""
        config = OutputConfig()
        assert config.precision == 6
        assert config.show_euler is False

    @pytest.mark.parametrize("precision", [0, 18])
    def test_precision_range(self, precision: int) -> None:
        """Test precision bounds."""
        with pytest.raises(ValidationError):
            OutputConfig(precision=precision)


class TestRigidPoseConfig:
    """Tests for the root configuration."""

    def test_default_config(self) -> None:
        """Test default configuration validates."""
        config = get_default_config()
        assert isinstance(config, RigidPoseConfig)
        validate_config(config)

    def test_extra_section_forbidden(self) -> None:
        """Test unknown top-level keys are rejected."""
        with pytest.raises(ValidationError):
            RigidPoseConfig(camera={})

    def test_empty_name_fails_validation(self) -> None:
        """Test cross-field validation."""
        config = RigidPoseConfig(project=ProjectConfig(name="  "))
        with pytest.raises(ConfigurationError, match="project.name"):
            validate_config(config)


class TestConfigLoader:
    """Tests for YAML configuration loading."""

    def test_load(self, tmp_path: Path) -> None:
        """Test loading a partial configuration file."""
        path = tmp_path / "config.yaml"
        save_yaml(
            {
                "project": {"run_id": "abc", "log_level": "DEBUG"},
                "output": {"precision": 4},
            },
            path,
        )

        config = load_config(path)

        assert config.project.run_id == "abc"
        assert config.project.log_level == LogLevel.DEBUG
        assert config.output.precision == 4
        assert config.mean.log_samples is True

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test missing configuration file."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Test saved configuration loads back equal."""
        config = RigidPoseConfig(
            project=ProjectConfig(run_id="fixed"),
            output=OutputConfig(show_euler=True),
        )
        path = tmp_path / "nested" / "config.yaml"

        save_config(config, path)

        assert load_config(path) == config
