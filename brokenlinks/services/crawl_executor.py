import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from brokenlinks.domain.crawl_context import CrawlContext
from brokenlinks.domain.crawl_summary import CrawlSummary
from brokenlinks.domain.crawl_target import CrawlTarget
from brokenlinks.domain.link_status import LinkStatus
from brokenlinks.domain.page_result import LinkRecord, PageResult, SkippedLink

logger = logging.getLogger(__name__)


class CrawlExecutor:
    """Runs one breadth-first crawl and reports broken links.

    This class owns the traversal control-flow (queue, page ceiling, deadline)
    and delegates fetching, URL resolution and liveness checks to its
    collaborators. It does NOT construct dependencies (that stays in the DI
    layer).
    """

    def __init__(
        self,
        *,
        url_classifier,
        page_fetcher,
        link_checker,
        crawl_policy,
        default_max_pages: int = 50,
        max_duration_seconds: Optional[float] = None,
        link_check_workers: int = 1,
    ):
        self.url_classifier = url_classifier
        self.page_fetcher = page_fetcher
        self.link_checker = link_checker
        self.crawl_policy = crawl_policy
        self.default_max_pages = int(default_max_pages)
        self.max_duration_seconds = max_duration_seconds
        self.link_check_workers = max(1, int(link_check_workers or 1))

    def create_context(self, seed_url: str, max_pages: Optional[int] = None) -> CrawlContext:
        """Validate the seed and build fresh run state. Raises InvalidSeedUrlError."""
        target = CrawlTarget.parse(seed_url)
        ceiling = max_pages if max_pages is not None and max_pages > 0 else self.default_max_pages
        context = CrawlContext(target, ceiling, max_duration_seconds=self.max_duration_seconds)
        context.enqueue(target.url)
        return context

    def crawl(self, seed_url: str, max_pages: Optional[int] = None) -> CrawlSummary:
        context = self.create_context(seed_url, max_pages)
        started = time.monotonic()
        logger.info("Starting crawl of %s (max_pages=%s)", context.target.url, context.max_pages)

        while True:
            url = context.next_url()
            if url is None:
                break
            context.record(self.process_page(url, context))

        if context.queue:
            reason = "deadline reached" if context.is_expired() else "page limit reached"
            logger.info("Stopping crawl of %s: %s with %s pages queued", context.target.url, reason, len(context.queue))

        summary = CrawlSummary.from_page_results(context.results)
        logger.info(
            "Crawl of %s finished in %.1fs: visited=%s probed=%s pages=%s links=%s broken=%s",
            context.target.url,
            time.monotonic() - started,
            len(context.visited),
            len(context.status_cache),
            summary.total_pages,
            summary.total_links,
            summary.total_broken_links,
        )
        return summary

    def process_page(self, url: str, context: CrawlContext) -> PageResult:
        """Fetch one page, queue the pages it links to, and check every link on it."""
        logger.info("Checking page: %s", url)
        try:
            fetched = self.page_fetcher.fetch_links(url)
        except Exception as e:
            logger.error("Fetch error for %s: %s", url, e, exc_info=True)
            return PageResult(url=url)
        if not fetched.ok:
            return PageResult(url=url)

        skipped: List[SkippedLink] = list(fetched.skipped)
        links: List[str] = []
        seen = set()
        for href in fetched.hrefs:
            classification = self.url_classifier.classify(href, context.target.origin, url)
            if not classification.is_resolved:
                logger.debug("Skipping (%s) %r on %s", classification.reason, href, url)
                skipped.append(SkippedLink(href=href, reason=classification.reason))
                continue
            if classification.url in seen:
                continue
            seen.add(classification.url)
            links.append(classification.url)
            if self.crawl_policy.enqueue_before_check:
                self._maybe_enqueue(classification.url, context)

        valid: List[LinkRecord] = []
        broken: List[LinkRecord] = []
        for link, status in zip(links, self._check_links(links, context)):
            if status.is_valid:
                valid.append(LinkRecord(url=link, status=status.status))
                if not self.crawl_policy.enqueue_before_check:
                    self._maybe_enqueue(link, context)
            else:
                broken.append(LinkRecord(url=link, status=status.status, error=status.error))

        return PageResult(url=url, valid_links=valid, broken_links=broken, skipped=skipped)

    def _maybe_enqueue(self, url: str, context: CrawlContext) -> None:
        if not self.crawl_policy.should_enqueue(url, context):
            return
        if context.enqueue(url):
            logger.debug("Queued %s (queue=%s)", url, len(context.queue))
        else:
            logger.debug("Not queuing %s: page limit %s reached", url, context.max_pages)

    def _check_links(self, links: List[str], context: CrawlContext) -> List[LinkStatus]:
        def check(link: str) -> LinkStatus:
            return self.link_checker.check(link, context.status_cache)

        if self.link_check_workers <= 1 or len(links) <= 1:
            return [check(link) for link in links]
        with ThreadPoolExecutor(max_workers=min(self.link_check_workers, len(links))) as pool:
            return list(pool.map(check, links))
