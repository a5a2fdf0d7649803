"""Filter service layer applying structured queries to annotation collections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from AnnotationFilter.core.models import Annotation
from AnnotationFilter.core.query import FilterQuery
from AnnotationFilter.filters import UNKNOWN_FIELD_POLICIES, build_filter_tree
from AnnotationFilter.utils.log import log


@dataclass(slots=True)
class AnnotationFilterService:
    """Application service that runs queries over an annotation collection."""

    unknown_fields: str = "ignore"

    def __post_init__(self) -> None:
        if self.unknown_fields not in UNKNOWN_FIELD_POLICIES:
            raise ValueError(f"unknown_fields must be one of {list(UNKNOWN_FIELD_POLICIES)}")

    def run(self, annotations: Sequence[Annotation], query: FilterQuery) -> list[str]:
        """Return the ids of annotations matching ``query``.

        Args:
            annotations: Collection to filter, in display order.
            query: Structured query.

        Returns:
            Matching annotation ids in input order.
        """
        return [ann.id for ann in self.select(annotations, query) if ann.id]

    def select(self, annotations: Sequence[Annotation], query: FilterQuery) -> list[Annotation]:
        """Return the matching annotation records themselves, in input order.

        Each record is tested on its own, so records sharing an id are kept
        or dropped independently. Records without an id never match.
        """
        log.debug(
            "Filtering %d annotations name=%s fields=%s",
            len(annotations),
            query.name,
            query.active_fields(),
        )
        root = build_filter_tree(query, unknown_fields=self.unknown_fields)  # type: ignore[arg-type]
        selected = [ann for ann in annotations if ann.id and root.matches(ann)]
        log.info("Query %s matched %d of %d annotations", query.name or "-", len(selected), len(annotations))
        return selected
