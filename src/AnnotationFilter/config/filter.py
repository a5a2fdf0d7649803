"""Filter domain configuration and query DSL parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from AnnotationFilter.config.common import ConfigSection, expect_choice, expect_number, expect_str
from AnnotationFilter.core.query import Facet, FilterQuery, Term
from AnnotationFilter.filters.matchers import supported_field_names
from AnnotationFilter.filters.view import UNKNOWN_FIELD_POLICIES

_ALLOWED_FIELDS = frozenset(supported_field_names())
_ALLOWED_OPS = ("and", "or")
_FACET_KEYS = {"terms", "operator"}
_NUMERIC_FIELDS = {"since"}


@dataclass(frozen=True, slots=True)
class FilterConfig:
    """Store validated filter behavior and queries."""

    unknown_fields: str
    queries: tuple[FilterQuery, ...]


def load_filter(raw: Mapping[str, Any]) -> FilterConfig:
    """Load filter domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed filter configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or values are invalid.
    """
    section = ConfigSection.of(raw, "filter", required=False)
    unknown_fields = section.get_choice("unknown_fields", UNKNOWN_FIELD_POLICIES, "ignore")

    queries_obj = raw.get("queries")
    if queries_obj is None:
        raise ValueError("Missing required config: queries")
    if not isinstance(queries_obj, list):
        raise TypeError("queries must be a list")
    queries = tuple(
        parse_filter_query(item, f"queries[{idx}]", strict_fields=unknown_fields == "error")
        for idx, item in enumerate(queries_obj)
    )
    return FilterConfig(unknown_fields=unknown_fields, queries=queries)


def check_filter(config: FilterConfig) -> None:
    """Validate filter domain constraints.

    Raises:
        ValueError: If values violate filter constraints.
    """
    if not config.queries:
        raise ValueError("queries must include at least one query")


def parse_filter_query(value: Any, config_key: str, *, strict_fields: bool = False) -> FilterQuery:
    """Parse a query mapping into ``FilterQuery``.

    Args:
        value: Query mapping with optional ``name`` and a ``fields`` mapping.
        config_key: Full key path used in error messages.
        strict_fields: Reject field names that have no matcher.

    Returns:
        Parsed query object.

    Raises:
        TypeError: If query shape/types are invalid.
        ValueError: If field names or operators are invalid.
    """
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object")

    name = None
    if value.get("name") is not None:
        name = expect_str(value["name"], f"{config_key}.name").strip() or None

    fields_obj = value.get("fields")
    if not isinstance(fields_obj, Mapping):
        raise TypeError(f"{config_key}.fields must be an object")

    fields: dict[str, Facet] = {}
    for key, facet_value in fields_obj.items():
        if not isinstance(key, str):
            raise TypeError(f"{config_key}.fields names must be strings")
        field = key.strip().lower()
        if strict_fields and field not in _ALLOWED_FIELDS:
            raise ValueError(f"{config_key}.fields has unknown field: {field}")
        fields[field] = _parse_facet(field, facet_value, f"{config_key}.fields.{field}")

    if not fields:
        raise ValueError(f"{config_key} must include at least one field")
    return FilterQuery(name=name, fields=fields)


def _parse_facet(field: str, value: Any, config_key: str) -> Facet:
    """Parse one field's facet.

    A facet is either an object with ``terms`` and ``operator``, or a bare
    term / term list that combines with ``and``.

    Raises:
        TypeError: If the facet type is invalid.
        ValueError: If unknown keys or operators exist.
    """
    if value is None:
        return Facet()
    if not isinstance(value, Mapping):
        return Facet(terms=_as_terms(field, value, config_key))

    unknown = {str(k) for k in value.keys()} - _FACET_KEYS
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")

    operator = expect_choice(value.get("operator", "and"), _ALLOWED_OPS, f"{config_key}.operator")
    terms = _as_terms(field, value.get("terms"), f"{config_key}.terms")
    return Facet(terms=terms, operator=operator)  # type: ignore[arg-type]


def _as_terms(field: str, value: Any, config_key: str) -> tuple[Term, ...]:
    """Normalize terms from a scalar or list into a tuple.

    ``since`` terms become non-negative floats (age in seconds); other terms
    become stripped, non-empty strings.

    Raises:
        TypeError: If terms have the wrong type.
        ValueError: If a ``since`` term is negative.
    """
    if value is None:
        return ()
    items = value if isinstance(value, list) else [value]

    out: list[Term] = []
    for idx, item in enumerate(items):
        item_key = f"{config_key}[{idx}]" if isinstance(value, list) else config_key
        if field in _NUMERIC_FIELDS:
            age = expect_number(item, item_key)
            if age < 0:
                raise ValueError(f"{item_key} must not be negative")
            out.append(age)
            continue
        term = expect_str(item, item_key).strip()
        if term:
            out.append(term)
    return tuple(out)
