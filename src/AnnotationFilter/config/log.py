"""Logging section of the configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from AnnotationFilter.config.common import ConfigSection

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Console level and optional per-action log file."""

    level: str
    to_file: bool = False
    dir: str = "log"


def load_log(raw: Mapping[str, Any]) -> LogConfig:
    """Load the ``log`` section.

    ``level`` is required and matched case-insensitively; ``to_file`` and
    ``dir`` default to no file logging under ``log/``.

    Raises:
        TypeError: If values have the wrong type.
        ValueError: If ``level`` is missing or not a known level.
    """
    section = ConfigSection.of(raw, "log", required=True)
    return LogConfig(
        level=section.get_choice("level", LOG_LEVELS),
        to_file=section.get_bool("to_file", False),
        dir=section.get_str("dir", "log").strip(),
    )


def check_log(config: LogConfig) -> None:
    # The directory only matters once file logging is on.
    if config.to_file and not config.dir:
        raise ValueError("log.dir must not be empty when log.to_file is enabled")
