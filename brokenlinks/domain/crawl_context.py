import time
from collections import deque
from typing import Callable, Deque, List, Optional

from brokenlinks.domain.crawl_target import CrawlTarget
from brokenlinks.domain.link_status_cache import LinkStatusCache
from brokenlinks.domain.page_result import PageResult
from brokenlinks.domain.visited_tracker import VisitedTracker


class CrawlContext:
    """All mutable state belonging to one crawl run.

    Built fresh for every run and handed to each collaborator explicitly;
    nothing here is shared between runs.
    """

    def __init__(
        self,
        target: CrawlTarget,
        max_pages: int,
        max_duration_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.target = target
        self.max_pages = int(max_pages)
        self.visited = VisitedTracker(max_size=self.max_pages)
        self.status_cache = LinkStatusCache()
        self.queue: Deque[str] = deque()
        self.results: List[PageResult] = []
        self.pages_fetched = 0
        self._clock = clock
        self.deadline = clock() + max_duration_seconds if max_duration_seconds else None

    def enqueue(self, url: str) -> bool:
        """Queue `url` for fetching, marking it visited. False if already seen or full."""
        if self.visited.is_visited(url):
            return False
        if not self.visited.mark(url):
            return False
        self.queue.append(url)
        return True

    def is_expired(self) -> bool:
        return self.deadline is not None and self._clock() >= self.deadline

    def has_capacity(self) -> bool:
        return self.pages_fetched < self.max_pages

    def next_url(self) -> Optional[str]:
        """Pop the next page to fetch, or None once the run should end."""
        if not self.queue or not self.has_capacity() or self.is_expired():
            return None
        self.pages_fetched += 1
        return self.queue.popleft()

    def record(self, result: PageResult) -> None:
        self.results.append(result)
