"""Command runner for coordinating CLI execution.

Manages component creation, logging configuration, and error handling for
command execution.
"""

from __future__ import annotations

from pathlib import Path

import click

from AnnotationFilter.cli.commands import FilterCommand
from AnnotationFilter.config import AppConfig
from AnnotationFilter.renderers import create_output_writer
from AnnotationFilter.services import create_filter_service
from AnnotationFilter.sources.json_file import load_annotations_file
from AnnotationFilter.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, component creation, annotation loading
    and error handling for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_filter(self, action: str, annotations_path: Path | None = None) -> None:
        """Execute filter command.

        Args:
            action: The CLI command name (e.g., 'filter').
            annotations_path: Optional override of ``input.path``.

        Raises:
            click.Abort: When loading or filtering fails.
        """
        configure_logging(
            level=self.config.log.level,
            action=action,
            log_to_file=self.config.log.to_file,
            log_dir=self.config.log.dir,
        )
        try:
            annotations = load_annotations_file(annotations_path or Path(self.config.input.path))

            output_writer = create_output_writer(self.config)
            command = FilterCommand(
                config=self.config,
                filter_service=create_filter_service(self.config),
                output_writer=output_writer,
            )
            command.execute(annotations)
            output_writer.finalize(action)

        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Filter failed: %s", e)
            raise click.Abort from e
