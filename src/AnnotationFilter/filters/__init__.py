"""Client-side annotation filtering.

Builds a tree of term and boolean filters from a structured query and
evaluates it against an in-memory annotation collection.
"""

from __future__ import annotations

from AnnotationFilter.filters.matchers import ANY_FIELDS, FIELD_MATCHERS, Matcher, supported_field_names
from AnnotationFilter.filters.nodes import BooleanOpFilter, Filter, TermFilter
from AnnotationFilter.filters.view import (
    UNKNOWN_FIELD_POLICIES,
    UnknownFieldError,
    build_filter_tree,
    filter_annotations,
)

__all__ = [
    "ANY_FIELDS",
    "FIELD_MATCHERS",
    "UNKNOWN_FIELD_POLICIES",
    "BooleanOpFilter",
    "Filter",
    "Matcher",
    "TermFilter",
    "UnknownFieldError",
    "build_filter_tree",
    "filter_annotations",
    "supported_field_names",
]
