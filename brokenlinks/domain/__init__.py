"""Domain objects for the broken link checker - explicit re-exports to satisfy linters."""
from .classification import SkipReason as SkipReason
from .classification import UrlClassification as UrlClassification
from .crawl_context import CrawlContext as CrawlContext
from .crawl_summary import CrawlSummary as CrawlSummary
from .crawl_summary import PageReport as PageReport
from .crawl_target import CrawlTarget as CrawlTarget
from .fetch_result import FetchResult as FetchResult
from .http_response import HttpResponse as HttpResponse
from .link_status import LinkStatus as LinkStatus
from .link_status_cache import LinkStatusCache as LinkStatusCache
from .page_result import LinkRecord as LinkRecord
from .page_result import PageResult as PageResult
from .page_result import SkippedLink as SkippedLink
from .visited_tracker import VisitedTracker as VisitedTracker

__all__ = [
    "SkipReason",
    "UrlClassification",
    "CrawlContext",
    "CrawlSummary",
    "PageReport",
    "CrawlTarget",
    "FetchResult",
    "HttpResponse",
    "LinkStatus",
    "LinkStatusCache",
    "LinkRecord",
    "PageResult",
    "SkippedLink",
    "VisitedTracker",
]
