"""Annotation JSON parser.

Parses annotation objects as returned by the annotation service API (or
exported from it) into the unified internal `Annotation` list.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from AnnotationFilter.core.models import Annotation, AnnotationTarget, UserInfo
from AnnotationFilter.utils.log import log

_KNOWN_KEYS = frozenset({"id", "text", "tags", "uri", "user", "user_info", "updated", "target"})


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _parse_user_info(raw: Any) -> UserInfo | None:
    if not isinstance(raw, Mapping):
        return None
    display_name = raw.get("display_name")
    return UserInfo(display_name=display_name if isinstance(display_name, str) else None)


def _parse_targets(raw: Any) -> tuple[AnnotationTarget, ...]:
    if not isinstance(raw, list):
        return ()
    targets: list[AnnotationTarget] = []
    for item in raw:
        if not isinstance(item, Mapping):
            continue
        selectors = item.get("selector") or []
        targets.append(
            AnnotationTarget(
                source=_as_str(item.get("source")),
                selector=tuple(dict(sel) for sel in selectors if isinstance(sel, Mapping)),
            )
        )
    return tuple(targets)


def parse_annotation(raw: Any) -> Annotation:
    """Parse one annotation object.

    Args:
        raw: Decoded JSON object of a single annotation.

    Returns:
        Parsed annotation. Missing string fields become empty strings.

    Raises:
        TypeError: If the object or its tags have the wrong shape.
    """
    if not isinstance(raw, Mapping):
        raise TypeError("annotation must be an object")

    tags = raw.get("tags") or []
    if not isinstance(tags, list):
        raise TypeError("annotation.tags must be a list")

    ann_id = raw.get("id")
    return Annotation(
        id=ann_id if isinstance(ann_id, str) and ann_id else None,
        text=_as_str(raw.get("text")),
        tags=tuple(tag for tag in tags if isinstance(tag, str)),
        uri=_as_str(raw.get("uri")),
        user=_as_str(raw.get("user")),
        user_info=_parse_user_info(raw.get("user_info")),
        updated=raw.get("updated"),
        target=_parse_targets(raw.get("target")),
        extra={k: v for k, v in raw.items() if k not in _KNOWN_KEYS},
    )


def parse_annotations_payload(data: Any) -> list[Annotation]:
    """Parse a list of annotations or an API search response.

    A search response is an object with a ``rows`` list and an optional
    ``replies`` list; replies follow the rows.

    Args:
        data: Decoded JSON document.

    Returns:
        Parsed annotations in document order.

    Raises:
        TypeError: If the document has neither shape.
    """
    if isinstance(data, Mapping):
        rows = data.get("rows")
        if not isinstance(rows, list):
            raise TypeError("annotation payload object must contain a 'rows' list")
        items = list(rows) + list(data.get("replies") or [])
    elif isinstance(data, list):
        items = data
    else:
        raise TypeError("annotation payload must be a list or an object with 'rows'")

    return [parse_annotation(item) for item in items]


def load_annotations_file(filepath: str | Path) -> list[Annotation]:
    """Load annotations from a JSON file.

    Args:
        filepath: Path to a UTF-8 JSON file.

    Returns:
        Parsed annotations in file order.
    """
    path = Path(filepath)
    data = json.loads(path.read_text(encoding="utf-8"))
    annotations = parse_annotations_payload(data)
    log.info("Loaded %d annotations from %s", len(annotations), path)
    return annotations
