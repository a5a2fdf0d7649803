"""JSON output renderers.

Renders query results into JSON-serializable objects.
Provides JsonFileWriter implementation for command output.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable

from AnnotationFilter.core.models import Annotation
from AnnotationFilter.core.query import FilterQuery
from AnnotationFilter.renderers.base import OutputWriter
from AnnotationFilter.utils.log import log


def render_json(annotations: Iterable[Annotation], query: FilterQuery) -> dict[str, Any]:
    """Render one query result into a JSON-serializable dict.

    Args:
        annotations: Matching annotations.
        query: The query that produced them.

    Returns:
        A dict with the query name, its fields, and the matching ids.
    """
    return {
        "name": query.name,
        "fields": _fields_payload(query),
        "ids": [ann.id for ann in annotations],
    }


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict[str, Any]] = []

    def write_query_result(self, annotations: list[Annotation], query: FilterQuery) -> None:
        """Accumulate query result for later writing."""
        self.all_results.append(render_json(annotations, query))

    def finalize(self, action: str) -> None:
        """Write accumulated results to JSON file.

        Args:
            action: The CLI command name (used in filename).
        """
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)


def _fields_payload(q: FilterQuery) -> dict[str, dict[str, Any]]:
    """Convert query facets to payload format."""
    return {
        name: {"terms": list(facet.terms), "operator": facet.operator}
        for name, facet in q.fields.items()
    }
