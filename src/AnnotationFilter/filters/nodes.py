"""Filter tree nodes."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from AnnotationFilter.core.models import Annotation
from AnnotationFilter.core.query import Operator
from AnnotationFilter.filters.matchers import Matcher

_ALLOWED_OPS = ("and", "or")


class Filter(Protocol):
    """Anything that can decide whether an annotation matches."""

    def matches(self, annotation: Annotation) -> bool:
        """Return True if the annotation matches this filter."""
        raise NotImplementedError


class TermFilter:
    """Filter that matches annotations against a single query term."""

    __slots__ = ("term", "matcher")

    def __init__(self, term: Any, matcher: Matcher[Any]) -> None:
        """Normalize the term once for all later comparisons.

        Args:
            term: Raw query term.
            matcher: Matching semantics of the term's field.
        """
        self.term = matcher.normalize(term)
        self.matcher = matcher

    def matches(self, annotation: Annotation) -> bool:
        """Return True if any value of the field matches the term."""
        matcher = self.matcher
        return any(
            matcher.matches(matcher.normalize(value), self.term)
            for value in matcher.field_values(annotation)
        )

    def __repr__(self) -> str:
        return f"TermFilter(term={self.term!r})"


class BooleanOpFilter:
    """Filter that combines other filters using AND or OR."""

    __slots__ = ("operator", "filters")

    def __init__(self, operator: Operator, filters: Sequence[Filter]) -> None:
        """Create a combinator node.

        Args:
            operator: ``"and"`` or ``"or"``.
            filters: Child filters, tested in order.

        Raises:
            ValueError: If the operator is not supported.
        """
        if operator not in _ALLOWED_OPS:
            raise ValueError(f"Unsupported filter operator: {operator!r}")
        self.operator = operator
        self.filters = tuple(filters)

    def matches(self, annotation: Annotation) -> bool:
        """Return True if all (AND) or any (OR) child filters match.

        With no children, AND matches everything and OR matches nothing.
        """
        if self.operator == "and":
            return all(child.matches(annotation) for child in self.filters)
        return any(child.matches(annotation) for child in self.filters)

    def __repr__(self) -> str:
        return f"BooleanOpFilter({self.operator!r}, {list(self.filters)!r})"
