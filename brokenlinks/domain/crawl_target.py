from __future__ import annotations

from dataclasses import dataclass

from brokenlinks.exceptions import InvalidSeedUrlError
from brokenlinks.utils.url_utils import HTTP_SCHEMES, canonicalize_url, hostname_of, origin_of


@dataclass(frozen=True)
class CrawlTarget:
    """The seed of a crawl run and the authority it defines."""

    url: str
    origin: str
    hostname: str

    @classmethod
    def parse(cls, seed) -> "CrawlTarget":
        """Validate and canonicalize a seed URL.

        Raises InvalidSeedUrlError for anything that is not an absolute
        http(s) URL with a host.
        """
        if not isinstance(seed, str) or not seed.strip():
            raise InvalidSeedUrlError(seed, "URL is required")
        raw = seed.strip()
        scheme = raw.split(":", 1)[0].lower() if ":" in raw else ""
        if scheme not in HTTP_SCHEMES:
            raise InvalidSeedUrlError(seed, "only http and https URLs can be crawled")
        try:
            url = canonicalize_url(raw)
        except ValueError as e:
            raise InvalidSeedUrlError(seed, str(e)) from e
        return cls(url=url, origin=origin_of(url), hostname=hostname_of(url))
