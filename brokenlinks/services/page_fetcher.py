import logging

from bs4 import BeautifulSoup

from brokenlinks.domain.fetch_result import FetchResult
from brokenlinks.domain.page_result import SkippedLink
from brokenlinks.exceptions import HttpFetchError
from brokenlinks.services.url_classifier import prefilter_reason

logger = logging.getLogger(__name__)


class PageFetcher:
    def __init__(self, http_service, timeout: float = 10):
        self.http_service = http_service
        self.timeout = timeout

    def fetch_links(self, url: str) -> FetchResult:
        """Fetch `url` and return the anchor hrefs found on it.

        Anything but a 200 response, and any transport or parse failure, gives a
        failed result with no links.
        """
        try:
            response = self.http_service.fetch(url, timeout=self.timeout)
        except HttpFetchError as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            return FetchResult.failed(error=str(e.original))

        if response.status_code != 200:
            logger.warning("Non-success status for %s: %s", url, response.status_code)
            return FetchResult.failed(status=response.status_code)

        try:
            hrefs, skipped = self.extract_hrefs(response.text)
        except Exception as e:
            logger.exception("Error extracting links from %s", url)
            return FetchResult.failed(status=response.status_code, error=str(e))

        logger.info("Fetched %s -> %s links, %s skipped", url, len(hrefs), len(skipped))
        return FetchResult.success(hrefs, skipped, status=response.status_code)

    def extract_hrefs(self, html: str) -> tuple[list[str], list[SkippedLink]]:
        """Return deduplicated hrefs of <a> tags, in document order.

        Blank, fragment-only and javascript: hrefs are split off as skipped,
        keeping the raw attribute value.
        """
        soup = BeautifulSoup(html or "", "html.parser")
        hrefs: list[str] = []
        skipped: list[SkippedLink] = []
        seen_hrefs = set()
        seen_skips = set()
        for a in soup.find_all("a", href=True):
            raw = a.get("href")
            reason = prefilter_reason(raw)
            if reason is not None:
                key = (raw, reason)
                if key not in seen_skips:
                    seen_skips.add(key)
                    skipped.append(SkippedLink(href=raw, reason=reason))
                continue
            value = raw.strip()
            if value in seen_hrefs:
                continue
            seen_hrefs.add(value)
            hrefs.append(value)
        return hrefs, skipped
