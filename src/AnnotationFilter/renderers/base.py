"""Base classes for output writers.

Provides abstraction for writing filter results to console or files.
Separates control flow from output logic for better testability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from AnnotationFilter.core.models import Annotation
from AnnotationFilter.core.query import FilterQuery


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_query_result(self, annotations: list[Annotation], query: FilterQuery) -> None:
        """Write results from a single query.

        Args:
            annotations: Matching annotations, in input order.
            query: The query that produced these results.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'filter').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_query_result(self, annotations: list[Annotation], query: FilterQuery) -> None:
        """Send query results to all writers."""
        for writer in self.writers:
            writer.write_query_result(annotations, query)

    def finalize(self, action: str) -> None:
        """Finalize all writers."""
        for writer in self.writers:
            writer.finalize(action)
