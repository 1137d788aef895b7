"""Aggregate crawl results in the shape returned to API callers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from brokenlinks.domain.page_result import LinkRecord, PageResult


@dataclass(frozen=True)
class PageReport:
    url: str
    total_links: int
    broken_links: tuple[LinkRecord, ...]

    @property
    def broken_link_count(self) -> int:
        return len(self.broken_links)

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "totalLinks": self.total_links,
            "brokenLinkCount": self.broken_link_count,
            "brokenLinks": [link.to_dict() for link in self.broken_links],
        }


@dataclass(frozen=True)
class CrawlSummary:
    total_pages: int
    total_links: int
    total_broken_links: int
    pages: tuple[PageReport, ...]

    @classmethod
    def from_page_results(cls, results: Iterable[PageResult]) -> "CrawlSummary":
        """Build the summary from page results in visitation order.

        Every page gets a report, including pages without broken links. Reports
        are ordered by descending broken-link count; `sorted` is stable, so
        pages with equal counts keep their visitation order.
        """
        results = list(results)
        reports = [
            PageReport(url=r.url, total_links=r.total_links, broken_links=r.broken_links)
            for r in results
        ]
        reports = sorted(reports, key=lambda p: p.broken_link_count, reverse=True)
        return cls(
            total_pages=len(results),
            total_links=sum(r.total_links for r in results),
            total_broken_links=sum(r.broken_count for r in results),
            pages=tuple(reports),
        )

    def to_dict(self) -> dict:
        return {
            "totalPages": self.total_pages,
            "totalLinks": self.total_links,
            "totalBrokenLinks": self.total_broken_links,
            "pages": [p.to_dict() for p in self.pages],
        }
