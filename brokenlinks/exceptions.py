"""Custom exceptions for the broken link checker."""


class InvalidSeedUrlError(ValueError):
    """Raised when a crawl is requested for a seed URL that cannot be crawled."""

    def __init__(self, url, reason: str = "invalid URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid seed URL {url!r}: {reason}")


class HttpFetchError(Exception):
    """Raised when an HTTP request fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")
