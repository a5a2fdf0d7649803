from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Union

RawTimestamp = Union[str, int, float, datetime, None]


@dataclass(frozen=True, slots=True)
class UserInfo:
    """Optional profile details attached to an annotation's author.

    Attributes:
        display_name: Human-friendly name shown instead of the account id.
    """

    display_name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class AnnotationTarget:
    """Document region an annotation is anchored to.

    Attributes:
        source: URI of the annotated document.
        selector: Selector objects (e.g. ``TextQuoteSelector``) as delivered
            by the annotation service.
    """

    source: str = ""
    selector: Sequence[Mapping[str, Any]] = ()


@dataclass(frozen=True, slots=True)
class Annotation:
    """Internal canonical annotation model.

    The filtering engine only reads these records; callers own them.

    Attributes:
        id: Server-assigned identifier. Unsaved annotations have none.
        text: Annotation body.
        tags: Tags in the order the author entered them.
        uri: URI of the annotated document.
        user: Account identifier of the author (e.g. ``acct:bob@example.org``).
        user_info: Optional profile details of the author.
        updated: Last update timestamp exactly as delivered (ISO-8601 string,
            epoch milliseconds, or datetime). It is converted when matched so
            that a malformed value only fails the match that needs it.
        target: Anchoring targets; the first one carries the quote.
        extra: Extension point for payload keys the model does not name.
    """

    id: Optional[str]
    text: str = ""
    tags: Sequence[str] = ()
    uri: str = ""
    user: str = ""
    user_info: Optional[UserInfo] = None
    updated: RawTimestamp = None
    target: Sequence[AnnotationTarget] = ()
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))
