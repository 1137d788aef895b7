from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from brokenlinks.domain.page_result import SkippedLink


@dataclass(frozen=True)
class FetchResult:
    """What the page fetcher got out of one page.

    A failed fetch (transport error or non-200 status) carries no hrefs and no
    skips; the page still counts as visited.
    """

    hrefs: tuple[str, ...] = ()
    skipped: tuple[SkippedLink, ...] = ()
    status: Optional[int] = None
    error: Optional[str] = None
    ok: bool = True

    @classmethod
    def success(cls, hrefs, skipped, status: int = 200) -> "FetchResult":
        return cls(hrefs=tuple(hrefs), skipped=tuple(skipped), status=status, ok=True)

    @classmethod
    def failed(cls, *, status: Optional[int] = None, error: Optional[str] = None) -> "FetchResult":
        return cls(status=status, error=error, ok=False)
