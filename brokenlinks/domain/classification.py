from __future__ import annotations

from typing import NamedTuple, Optional


class SkipReason:
    BLANK = "blank"
    ANCHOR = "anchor"
    JAVASCRIPT = "javascript"
    INVALID = "invalid"

    ALL = frozenset((BLANK, ANCHOR, JAVASCRIPT, INVALID))


class UrlClassification(NamedTuple):
    """Outcome of classifying a raw href: either a resolved URL or a skip reason."""
    url: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def resolved(cls, url: str) -> "UrlClassification":
        return cls(url=url, reason=None)

    @classmethod
    def skipped(cls, reason: str) -> "UrlClassification":
        return cls(url=None, reason=reason)

    @property
    def is_resolved(self) -> bool:
        return self.url is not None
