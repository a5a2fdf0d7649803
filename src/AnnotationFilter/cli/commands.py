"""Command implementations for AnnotationFilter CLI.

Encapsulates business logic for commands like filter, separated from
CLI parameter handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from AnnotationFilter.config import AppConfig
from AnnotationFilter.core.models import Annotation
from AnnotationFilter.renderers import OutputWriter
from AnnotationFilter.services.filter import AnnotationFilterService
from AnnotationFilter.utils.log import log


@dataclass(slots=True)
class FilterCommand:
    """Encapsulates filter command business logic.

    Runs every configured query over the same annotation collection and
    delegates output to OutputWriter.
    """

    config: AppConfig
    filter_service: AnnotationFilterService
    output_writer: OutputWriter

    def execute(self, annotations: Sequence[Annotation]) -> None:
        """Execute all configured queries.

        Args:
            annotations: Loaded annotation collection.
        """
        queries = self.config.filter.queries
        multiple = len(queries) > 1

        for idx, query in enumerate(queries, start=1):
            if multiple:
                log.info("=== Query %d/%d ===", idx, len(queries))
            if query.name:
                log.info("name=%s", query.name)
            log.info("fields=%s", query.active_fields())

            matched = self.filter_service.select(annotations, query)
            self.output_writer.write_query_result(matched, query)
