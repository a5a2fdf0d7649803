"""CLI package for AnnotationFilter command orchestration.

This package contains the modular CLI components for the filter command,
factored into separate modules for better maintainability and testability.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from AnnotationFilter.cli.runner import CommandRunner
from AnnotationFilter.cli.ui import cli


def main() -> None:
    """Run AnnotationFilter CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
