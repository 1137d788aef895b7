import logging

from brokenlinks.domain.crawl_context import CrawlContext
from brokenlinks.utils.url_utils import HTTP_SCHEMES

logger = logging.getLogger(__name__)

FORBIDDEN = 403


class CrawlPolicy:
    """Encapsulates crawl decision rules: which links count as alive and which pages get queued.

    `allow_forbidden` treats 403 as alive, since many servers refuse automated
    probes with 403 even though the page exists.

    `enqueue_before_check` makes the crawl queue same-domain pages as soon as
    they are discovered, before their liveness check runs. With it off, a page
    is only queued after its probe came back valid, so servers that reject HEAD
    requests shrink crawl coverage.
    """

    def __init__(self, url_classifier, allow_forbidden: bool = True, enqueue_before_check: bool = True):
        self.url_classifier = url_classifier
        self.allow_forbidden = bool(allow_forbidden)
        self.enqueue_before_check = bool(enqueue_before_check)

    def is_valid_status(self, status: int) -> bool:
        if 200 <= status < 400:
            return True
        return self.allow_forbidden and status == FORBIDDEN

    def should_enqueue(self, url: str, context: CrawlContext) -> bool:
        """Check whether a resolved link should be fetched as a page."""
        if url.split(":", 1)[0].lower() not in HTTP_SCHEMES:
            return False
        if not self.url_classifier.is_same_domain(url, context.target.url):
            logger.debug("Skipping (external) %s -> not same host as %s", url, context.target.hostname)
            return False
        if not self.url_classifier.looks_like_html(url):
            logger.debug("Skipping (asset) %s", url)
            return False
        if context.visited.is_visited(url):
            return False
        return True
