"""
Pydantic configuration schema for rigidpose.

Defines configuration models with validation, enum fields and default values.
"""

from enum import Enum
import uuid

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ============================================================================
# Sub-configuration Models
# ============================================================================


class ProjectConfig(BaseModel):
    """Project-level configuration."""

    name: str = Field(default="rigidpose", description="Project name")
    run_id: str = Field(
        default="auto", description="Run identifier (auto generates UUID)"
    )
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    json_logs: bool = Field(default=False, description="Emit JSON log lines")

    @field_validator("run_id", mode="before")
    @classmethod
    def generate_run_id(cls, v: str) -> str:
        """Generate UUID if run_id is 'auto'."""
        if v == "auto":
            return str(uuid.uuid4())[:8]
        return v


class MeanConfig(BaseModel):
    """Weighted mean pose configuration."""

    log_samples: bool = Field(
        default=True, description="Log every sample at DEBUG level"
    )
    warn_on_hemisphere_flip: bool = Field(
        default=True, description="Warn when sample quaternions disagree in sign"
    )


class OutputConfig(BaseModel):
    """Pose output formatting configuration."""

    precision: int = Field(
        default=6, ge=1, le=17, description="Significant digits in pose output"
    )
    show_euler: bool = Field(
        default=False, description="Also print roll/pitch/yaw in degrees"
    )


# ============================================================================
# Root Configuration Model
# ============================================================================


class RigidPoseConfig(BaseModel):
    """Root configuration model for rigidpose."""

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    mean: MeanConfig = Field(default_factory=MeanConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = {"extra": "forbid"}
