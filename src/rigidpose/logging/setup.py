"""
Structured logging setup for rigidpose.

Diagnostics (per-sample mean lines, hemisphere warnings) go to stderr so the
pose text printed by the CLI on stdout stays machine-readable. Batch runs use
JSON lines; interactive runs use the colored console renderer.
"""

import logging
import sys
from typing import Any, Optional

import numpy as np
import structlog
from structlog.types import EventDict, Processor, WrappedLogger


def configure_logging(
    level: str = "INFO",
    run_id: Optional[str] = None,
    json_format: bool = False,
) -> None:
    """
    Configure structured logging for rigidpose.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        run_id: Run identifier bound to every event of this process.
        json_format: If True, output JSON lines.
    """
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )

    structlog.contextvars.clear_contextvars()
    if run_id:
        structlog.contextvars.bind_contextvars(run_id=run_id)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _numpy_to_builtin,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _numpy_to_builtin(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Convert numpy arrays and scalars in an event to lists and floats."""
    for key, value in event_dict.items():
        if isinstance(value, np.ndarray):
            event_dict[key] = value.tolist()
        elif isinstance(value, np.generic):
            event_dict[key] = value.item()
    return event_dict


def get_logger(name: Optional[str] = None, **initial_values: Any) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, usually ``__name__``.
        **initial_values: Key/value pairs bound to every event of this logger.

    Returns:
        Bound logger instance.
    """
    return structlog.get_logger(name, **initial_values)
