from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class LinkRecord:
    url: str
    status: int
    error: Optional[str] = None

    def to_dict(self) -> dict:
        d = {"url": self.url, "status": self.status}
        if self.error is not None:
            d["error"] = self.error
        return d


@dataclass(frozen=True)
class SkippedLink:
    href: str
    reason: str

    def to_dict(self) -> dict:
        return {"href": self.href, "reason": self.reason}


@dataclass(frozen=True)
class PageResult:
    """Links found on one fetched page, split into valid, broken and skipped.

    Built once when the page finishes processing; `total_links` is computed at
    construction and never changes afterward.
    """

    url: str
    valid_links: tuple[LinkRecord, ...] = ()
    broken_links: tuple[LinkRecord, ...] = ()
    skipped: tuple[SkippedLink, ...] = ()
    total_links: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "valid_links", tuple(self.valid_links))
        object.__setattr__(self, "broken_links", tuple(self.broken_links))
        object.__setattr__(self, "skipped", tuple(self.skipped))
        object.__setattr__(
            self,
            "total_links",
            len(self.valid_links) + len(self.broken_links) + len(self.skipped),
        )

    @property
    def broken_count(self) -> int:
        return len(self.broken_links)
