"""
Configuration loader for rigidpose.

Handles YAML loading and default configuration.
"""

from pathlib import Path

from rigidpose.config.schema import RigidPoseConfig
from rigidpose.config.validation import validate_config
from rigidpose.utils.io import load_yaml, save_yaml


def load_config(config_path: Path) -> RigidPoseConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Validated RigidPoseConfig instance.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        ValueError: If the configuration is invalid.
    """
    raw_config = load_yaml(Path(config_path))

    config = RigidPoseConfig(**raw_config)
    validate_config(config)

    return config


def save_config(config: RigidPoseConfig, output_path: Path) -> None:
    """
    Save configuration to a YAML file.

    Args:
        config: RigidPoseConfig instance to save.
        output_path: Path to the output YAML file.
    """
    save_yaml(config.model_dump(mode="json"), Path(output_path))


def get_default_config() -> RigidPoseConfig:
    """
    Get default configuration with all default values.

    Returns:
        RigidPoseConfig instance with defaults.
    """
    return RigidPoseConfig()
