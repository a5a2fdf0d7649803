"""Text normalization for comparison-insensitive matching."""

from __future__ import annotations

import unicodedata


def fold(value: str) -> str:
    """Remove combining marks (accents, diacritics) from decomposed text."""
    return "".join(ch for ch in value if not unicodedata.combining(ch))


def normalize_text(value: str) -> str:
    """Return the canonical form used to compare terms and field values.

    The value is NFKD-normalized so that accented characters decompose, the
    combining marks are folded away, and the result is case-folded. Both
    ``"Café"`` and ``"CAFE"`` normalize to ``"cafe"``.

    Args:
        value: Raw term or field value.

    Returns:
        Normalized string.
    """
    return fold(unicodedata.normalize("NFKD", value)).casefold()
