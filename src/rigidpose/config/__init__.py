"""Configuration module for rigidpose."""

from rigidpose.config.schema import (
    LogLevel,
    MeanConfig,
    OutputConfig,
    ProjectConfig,
    RigidPoseConfig,
)
from rigidpose.config.loader import get_default_config, load_config, save_config
from rigidpose.config.validation import ConfigurationError, validate_config

__all__ = [
    "LogLevel",
    "MeanConfig",
    "OutputConfig",
    "ProjectConfig",
    "RigidPoseConfig",
    "get_default_config",
    "load_config",
    "save_config",
    "ConfigurationError",
    "validate_config",
]
