"""Derived values read from annotation records."""

from __future__ import annotations

from AnnotationFilter.core.models import Annotation

_QUOTE_SELECTOR = "TextQuoteSelector"


def quote(annotation: Annotation) -> str | None:
    """Return the quoted document text of an annotation.

    Only the first target is consulted. Page notes and replies have no
    target and therefore no quote.

    Args:
        annotation: Annotation to inspect.

    Returns:
        The ``exact`` text of the first ``TextQuoteSelector``, or None.
    """
    if not annotation.target:
        return None
    for selector in annotation.target[0].selector:
        if selector.get("type") == _QUOTE_SELECTOR:
            exact = selector.get("exact")
            return exact if isinstance(exact, str) else None
    return None
