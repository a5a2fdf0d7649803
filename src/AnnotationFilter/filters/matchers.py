"""Per-field matching semantics.

A `Matcher` describes how to test whether an annotation matches a query term
for one field: which values to pull out of the annotation, how to normalize
terms and values before comparing them, and the comparison itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import time
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from dateutil import parser as dt_parser

from AnnotationFilter.core.metadata import quote
from AnnotationFilter.core.models import Annotation, RawTimestamp
from AnnotationFilter.core.text import normalize_text
from AnnotationFilter.utils.log import log

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Matcher(Generic[T]):
    """Matching semantics for one query field.

    Attributes:
        field_values: Extract the values to test from an annotation. Returning
            several values means the term matches if any one of them does.
        normalize: Normalize a term or a field value for comparison.
        matches: Test a normalized field value against a normalized term.
    """

    field_values: Callable[[Annotation], Sequence[T]]
    normalize: Callable[[T], T]
    matches: Callable[[T, T], bool]


def string_field_matcher(field_values: Callable[[Annotation], Sequence[str]]) -> Matcher[str]:
    """Create a matcher testing whether a term appears in a string value."""
    return Matcher(
        field_values=field_values,
        normalize=normalize_text,
        matches=lambda value, term: term in value,
    )


def timestamp_ms(value: RawTimestamp) -> float | None:
    """Convert an annotation timestamp to epoch milliseconds.

    Numbers are taken as epoch milliseconds. Naive datetimes and strings
    without an offset are taken as UTC.

    Args:
        value: Raw timestamp from the annotation payload.

    Returns:
        Milliseconds since the epoch, or None if the value cannot be read.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = dt_parser.parse(value)
        except (ValueError, OverflowError):
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp() * 1000


def _updated_values(annotation: Annotation) -> list[float]:
    updated = timestamp_ms(annotation.updated)
    if updated is None:
        log.debug("Unreadable updated timestamp: id=%s value=%r", annotation.id, annotation.updated)
        return []
    return [updated]


def _as_seconds(value: Any) -> float | None:
    """Read a ``since`` term (or an already converted value) as a float.

    Numeric strings are accepted; anything else yields None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _updated_within(updated_ms: float | None, age: float | None) -> bool:
    """Return True if ``updated_ms`` lies at most ``age`` seconds in the past."""
    if updated_ms is None or age is None:
        return False
    delta = (time.time() * 1000 - updated_ms) / 1000
    return delta <= age


def _user_values(annotation: Annotation) -> list[str]:
    display_name = annotation.user_info.display_name if annotation.user_info else None
    return [annotation.user or "", display_name or ""]


FIELD_MATCHERS: Mapping[str, Matcher[Any]] = {
    "quote": string_field_matcher(lambda ann: [quote(ann) or ""]),
    "since": Matcher(
        field_values=_updated_values,
        normalize=_as_seconds,
        matches=_updated_within,
    ),
    "tag": string_field_matcher(lambda ann: list(ann.tags)),
    "text": string_field_matcher(lambda ann: [ann.text or ""]),
    "uri": string_field_matcher(lambda ann: [ann.uri or ""]),
    "user": string_field_matcher(_user_values),
}

# Fields searched by the "any" pseudo-field; uri and since never take part.
ANY_FIELDS: tuple[str, ...] = ("quote", "text", "tag", "user")


def supported_field_names() -> tuple[str, ...]:
    """Return every field name a query may use, including ``any``."""
    return ("any", *FIELD_MATCHERS.keys())
