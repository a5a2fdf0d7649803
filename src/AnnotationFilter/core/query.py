from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Sequence, Union

Operator = Literal["and", "or"]
Term = Union[str, float]

ANY_FIELD = "any"


@dataclass(frozen=True, slots=True)
class Facet:
    """One field's contribution to a query.

    Attributes:
        terms: Raw search values for the field. Text fields take strings,
            ``since`` takes an age in seconds.
        operator: How multiple terms of this field combine: ``"and"`` means
            every term must match, ``"or"`` means any term may match.
    """

    terms: Sequence[Term] = ()
    operator: Operator = "and"


@dataclass(frozen=True, slots=True)
class FilterQuery:
    """Structured query passed through the service layer.

    Attributes:
        name: Optional query name for display.
        fields: Mapping of field name to `Facet`.
            Fields are quote/text/tag/uri/user/since.
            Special field ``any`` means "quote, text, tag or user".

    Different fields always combine with AND; only the terms inside one
    facet follow that facet's operator.
    """

    name: str | None
    fields: Mapping[str, Facet]

    def active_fields(self) -> dict[str, Facet]:
        """Return the facets that carry at least one term."""
        return {name: facet for name, facet in self.fields.items() if facet.terms}
