import logging
import threading
from concurrent.futures import Future
from typing import Callable, Dict, Optional

from brokenlinks.domain.link_status import LinkStatus

logger = logging.getLogger(__name__)


class LinkStatusCache:
    """
    Run-scoped memo of link liveness results keyed by exact URL string.

    Entries are write-once: the first result stored for a URL wins and later
    writes are ignored. `get_or_compute` also deduplicates in-flight checks so
    concurrent callers asking for the same URL wait for the first probe rather
    than issuing their own.
    """

    def __init__(self):
        self._results: Dict[str, LinkStatus] = {}
        self._in_flight: Dict[str, Future] = {}
        self._lock = threading.Lock()

    def get(self, url: str) -> Optional[LinkStatus]:
        with self._lock:
            return self._results.get(url)

    def set(self, url: str, status: LinkStatus) -> LinkStatus:
        """Store `status` unless a result already exists; return the stored value."""
        with self._lock:
            existing = self._results.get(url)
            if existing is not None:
                return existing
            self._results[url] = status
            return status

    def get_or_compute(self, url: str, compute: Callable[[str], LinkStatus]) -> LinkStatus:
        with self._lock:
            cached = self._results.get(url)
            if cached is not None:
                logger.debug("Link status cache hit for %s", url)
                return cached
            pending = self._in_flight.get(url)
            if pending is None:
                pending = Future()
                self._in_flight[url] = pending
                owner = True
            else:
                owner = False

        if not owner:
            logger.debug("Waiting on in-flight check for %s", url)
            return pending.result()

        try:
            status = self.set(url, compute(url))
        except BaseException as e:
            pending.set_exception(e)
            raise
        else:
            pending.set_result(status)
            return status
        finally:
            with self._lock:
                self._in_flight.pop(url, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
