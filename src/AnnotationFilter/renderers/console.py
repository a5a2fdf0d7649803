"""Console text output renderers.

Renders a list of `Annotation` into human-friendly text.
Provides ConsoleOutputWriter implementation for command output.
"""

from __future__ import annotations

from typing import Iterable

from AnnotationFilter.core.metadata import quote
from AnnotationFilter.core.models import Annotation
from AnnotationFilter.core.query import FilterQuery
from AnnotationFilter.renderers.base import OutputWriter
from AnnotationFilter.utils.log import log

_EXCERPT_LEN = 72


def _excerpt(text: str) -> str:
    """Collapse whitespace and shorten text to a single console line."""
    flat = " ".join(text.split())
    if len(flat) <= _EXCERPT_LEN:
        return flat
    return flat[: _EXCERPT_LEN - 3].rstrip() + "..."


def render_text(annotations: Iterable[Annotation]) -> str:
    """Render annotations into a human-readable text block.

    Args:
        annotations: Iterable of annotations.

    Returns:
        A formatted string ready to be printed.
    """
    lines: list[str] = []
    for idx, ann in enumerate(annotations, start=1):
        display_name = ann.user_info.display_name if ann.user_info else None
        lines.append(f"{idx}. {ann.id}  {display_name or ann.user or '-'}")
        if ann.uri:
            lines.append(f"   URI: {ann.uri}")
        quoted = quote(ann)
        if quoted:
            lines.append(f"   Quote: {_excerpt(quoted)}")
        if ann.text:
            lines.append(f"   Text: {_excerpt(ann.text)}")
        if ann.tags:
            lines.append(f"   Tags: {', '.join(ann.tags)}")
        lines.append("")
    if not lines:
        return "(no matching annotations)\n"
    return "\n".join(lines).rstrip() + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_query_result(self, annotations: list[Annotation], query: FilterQuery) -> None:
        """Write query result to console."""
        for line in render_text(annotations).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
