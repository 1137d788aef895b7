from typing import Optional


class VisitedTracker:
    """
    Tracks which URLs have been enqueued for fetching during a crawl run.

    The set only grows. When `max_size` is set it acts as the page ceiling:
    once full, `mark` refuses new URLs instead of evicting old ones, so a URL
    that was refused is never fetched.
    """

    def __init__(self, max_size: Optional[int] = None):
        self._max_size = int(max_size) if max_size is not None else None
        if self._max_size is not None and self._max_size <= 0:
            self._max_size = None
        self._visited: set[str] = set()

    def is_full(self) -> bool:
        return self._max_size is not None and len(self._visited) >= self._max_size

    def mark(self, url: str) -> bool:
        """Mark a URL as visited.

        Returns True if the URL is (now) tracked, False if the tracker is full
        and the URL was not already in it.
        """
        if url in self._visited:
            return True
        if self.is_full():
            return False
        self._visited.add(url)
        return True

    def is_visited(self, url: str) -> bool:
        return url in self._visited

    def __len__(self) -> int:
        return len(self._visited)
