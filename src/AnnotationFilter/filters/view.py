"""Filter annotations against a structured query."""

from __future__ import annotations

from typing import Any, Iterable, Literal, Mapping, Union

from AnnotationFilter.core.models import Annotation
from AnnotationFilter.core.query import ANY_FIELD, Facet, FilterQuery
from AnnotationFilter.filters.matchers import ANY_FIELDS, FIELD_MATCHERS
from AnnotationFilter.filters.nodes import BooleanOpFilter, Filter, TermFilter
from AnnotationFilter.utils.log import log

UnknownFieldPolicy = Literal["ignore", "error"]
QueryInput = Union[FilterQuery, Mapping[str, Facet]]

UNKNOWN_FIELD_POLICIES: tuple[str, ...] = ("ignore", "error")


class UnknownFieldError(ValueError):
    """Raised when a query names a field without a matcher."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Unknown filter field: {field}")
        self.field = field


def _make_term_filter(field: str, term: Any) -> TermFilter:
    return TermFilter(term, FIELD_MATCHERS[field])


def _term_filters(field: str, facet: Facet) -> list[Filter]:
    if field == ANY_FIELD:
        return [
            BooleanOpFilter("or", [_make_term_filter(any_field, term) for any_field in ANY_FIELDS])
            for term in facet.terms
        ]
    return [_make_term_filter(field, term) for term in facet.terms]


def build_filter_tree(query: QueryInput, *, unknown_fields: UnknownFieldPolicy = "ignore") -> BooleanOpFilter:
    """Convert a structured query into a filter tree.

    Each field with terms becomes one combinator node using the facet's
    operator; ``any`` terms expand into an OR over the free-text fields.
    All field nodes sit under a single AND root.

    Args:
        query: Structured query or plain mapping of field name to facet.
        unknown_fields: ``"ignore"`` drops facets for fields without a
            matcher, ``"error"`` rejects them.

    Returns:
        Root filter of the tree.

    Raises:
        UnknownFieldError: If a field is unknown and the policy is ``"error"``.
        ValueError: If the policy or a facet operator is invalid.
    """
    if unknown_fields not in UNKNOWN_FIELD_POLICIES:
        raise ValueError(f"unknown_fields must be one of {list(UNKNOWN_FIELD_POLICIES)}")

    fields = query.fields if isinstance(query, FilterQuery) else query
    field_filters: list[Filter] = []
    for field, facet in fields.items():
        if not facet.terms:
            continue
        if field != ANY_FIELD and field not in FIELD_MATCHERS:
            if unknown_fields == "error":
                raise UnknownFieldError(field)
            log.warning("Ignoring unknown filter field: %s", field)
            continue
        field_filters.append(BooleanOpFilter(facet.operator, _term_filters(field, facet)))

    return BooleanOpFilter("and", field_filters)


def filter_annotations(
    annotations: Iterable[Annotation],
    query: QueryInput,
    *,
    unknown_fields: UnknownFieldPolicy = "ignore",
) -> list[str]:
    """Filter a set of annotations against a structured query.

    Args:
        annotations: Annotations to test, in display order.
        query: Structured query or plain mapping of field name to facet.
        unknown_fields: Policy for fields without a matcher, see
            `build_filter_tree`.

    Returns:
        IDs of matching annotations, in input order. Annotations without an
        id never match.
    """
    root = build_filter_tree(query, unknown_fields=unknown_fields)
    return [ann.id for ann in annotations if ann.id and root.matches(ann)]
