"""
Configuration validation for rigidpose.

Provides cross-field checks beyond Pydantic schema validation.
"""

from rigidpose.config.schema import RigidPoseConfig


class ConfigurationError(ValueError):
    """Configuration validation error."""

    pass


def validate_config(config: RigidPoseConfig) -> None:
    """
    Perform cross-field validation on configuration.

    Args:
        config: RigidPoseConfig instance to validate.

    Raises:
        ConfigurationError: If validation fails.
    """
    errors: list[str] = []

    errors.extend(_validate_project(config))

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(
            f"  - {e}" for e in errors
        )
        raise ConfigurationError(error_msg)


def _validate_project(config: RigidPoseConfig) -> list[str]:
    """Validate project configuration."""
    errors: list[str] = []

    if not config.project.name.strip():
        errors.append("project.name must not be empty")

    if not config.project.run_id.strip():
        errors.append("project.run_id must not be empty")

    return errors

