import logging

from brokenlinks.domain.link_status import LinkStatus
from brokenlinks.domain.link_status_cache import LinkStatusCache
from brokenlinks.exceptions import HttpFetchError

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = 405


class LinkStatusChecker:
    def __init__(self, http_service, crawl_policy, timeout: float = 5):
        self.http_service = http_service
        self.crawl_policy = crawl_policy
        self.timeout = timeout

    def check(self, url: str, cache: LinkStatusCache) -> LinkStatus:
        """Return the liveness of `url`, probing at most once per run.

        The result is stored in `cache` under the exact string given; callers
        are expected to pass canonical URLs.
        """
        return cache.get_or_compute(url, self.probe)

    def probe(self, url: str) -> LinkStatus:
        """HEAD `url`, falling back to GET when the server answers 405."""
        try:
            status = self.http_service.probe(url, "HEAD", timeout=self.timeout).status_code
        except HttpFetchError as e:
            logger.info("Link check failed for %s: %s", url, e.original)
            return LinkStatus(is_valid=False, status=0, error=str(e.original))
        except Exception as e:
            logger.error("Unexpected error checking %s: %s", url, e, exc_info=True)
            return LinkStatus(is_valid=False, status=0, error=str(e))

        if status == METHOD_NOT_ALLOWED:
            logger.debug("HEAD not allowed for %s; retrying with GET", url)
            try:
                status = self.http_service.probe(url, "GET", timeout=self.timeout).status_code
            except Exception as e:
                logger.debug("GET fallback failed for %s: %s", url, e)

        is_valid = self.crawl_policy.is_valid_status(status)
        if not is_valid:
            logger.info("Broken link %s -> %s", url, status)
        return LinkStatus(is_valid=is_valid, status=status)
