"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from AnnotationFilter.cli.runner import CommandRunner
from AnnotationFilter.config import load_config


@click.group(help="AnnotationFilter: filter annotations with structured queries.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    load_dotenv()

    ctx.obj = load_config(config_path)


@cli.command("filter")
@click.option(
    "--annotations",
    "annotations_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="Annotation JSON file; overrides input.path from the config.",
)
@click.pass_context
def filter_cmd(ctx: click.Context, annotations_path: Path | None) -> None:
    """Filter annotations and print matches to console via logging.

    Queries are read from the YAML config passed to the root command.

    Args:
        ctx: Click context.
        annotations_path: Optional annotation file override.

    Raises:
        click.Abort: When filtering fails.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_filter(action=ctx.command.name, annotations_path=annotations_path)
