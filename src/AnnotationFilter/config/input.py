"""Input domain configuration (where annotations are read from)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from AnnotationFilter.config.common import ConfigSection


@dataclass(frozen=True, slots=True)
class InputConfig:
    """Store the validated annotation source path."""

    path: str


def load_input(raw: Mapping[str, Any]) -> InputConfig:
    """Load input configuration from raw mapping."""
    section = ConfigSection.of(raw, "input", required=True)
    return InputConfig(path=section.get_str("path"))


def check_input(config: InputConfig) -> None:
    """Validate input domain constraints."""
    if not config.path.strip():
        raise ValueError("input.path must not be empty")
