"""Resolve raw hrefs into absolute http(s) URLs and answer questions about them."""
import logging
from typing import Iterable, Optional
from urllib.parse import urljoin, urlsplit

from brokenlinks.domain.classification import SkipReason, UrlClassification
from brokenlinks.utils.url_utils import HTTP_SCHEMES, canonicalize_url, hostname_of

logger = logging.getLogger(__name__)

DEFAULT_NON_HTML_EXTENSIONS: frozenset[str] = frozenset((
    # images
    ".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg", ".ico", ".bmp", ".tif", ".tiff", ".avif",
    # documents and archives
    ".pdf", ".zip", ".rar", ".7z", ".tar", ".gz", ".tgz", ".bz2", ".xz", ".dmg", ".exe", ".iso",
    # audio / video
    ".mp4", ".mp3", ".wav", ".webm", ".ogg", ".ogv", ".avi", ".mov", ".mkv", ".flac", ".m4a", ".aac",
    # fonts
    ".woff", ".woff2", ".ttf", ".otf", ".eot",
    # stylesheets and scripts
    ".css", ".js", ".mjs", ".map",
    # structured data
    ".json", ".xml", ".csv", ".rss", ".atom", ".yaml", ".yml",
))

_NON_NAVIGABLE_PREFIXES = ("mailto:", "tel:")


def _normalize_extensions(extensions: Optional[Iterable[str]]) -> Optional[frozenset[str]]:
    if extensions is None:
        return None
    out = set()
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        out.add(ext if ext.startswith(".") else "." + ext)
    return frozenset(out)


def prefilter_reason(href) -> Optional[str]:
    """Skip reason for hrefs recognizable before any resolution, else None.

    Covers blank, fragment-only and javascript: hrefs.
    """
    if not isinstance(href, str):
        return SkipReason.INVALID
    value = href.strip()
    if not value:
        return SkipReason.BLANK
    if value.startswith("#"):
        return SkipReason.ANCHOR
    if value.lower().startswith("javascript:"):
        return SkipReason.JAVASCRIPT
    return None


class UrlClassifier:
    def __init__(
        self,
        non_html_extensions: Optional[Iterable[str]] = None,
        html_extensions: Optional[Iterable[str]] = None,
    ):
        deny = _normalize_extensions(non_html_extensions)
        self.non_html_extensions = deny if deny is not None else DEFAULT_NON_HTML_EXTENSIONS
        # Extensions listed here are always treated as pages, even if also denied.
        self.html_extensions = _normalize_extensions(html_extensions) or frozenset()

    def classify(self, href, base_origin: str, page_url: str) -> UrlClassification:
        """Resolve `href` found on `page_url` to an absolute http(s) URL.

        Root-relative hrefs resolve against `base_origin`, other relative hrefs
        against `page_url`. Never raises: anything unusable comes back as a
        skipped classification.
        """
        reason = prefilter_reason(href)
        if reason is not None:
            return UrlClassification.skipped(reason)

        value = href.strip()
        lowered = value.lower()
        if lowered.startswith(_NON_NAVIGABLE_PREFIXES):
            return UrlClassification.skipped(SkipReason.INVALID)

        try:
            if value.startswith("/"):
                joined = urljoin(base_origin, value)
            elif lowered.startswith(("http://", "https://")):
                joined = value
            else:
                joined = urljoin(page_url, value)
            if urlsplit(joined).scheme.lower() not in HTTP_SCHEMES:
                logger.debug("Skipping (scheme) %s on %s", value, page_url)
                return UrlClassification.skipped(SkipReason.INVALID)
            return UrlClassification.resolved(canonicalize_url(joined))
        except ValueError as e:
            logger.debug("Skipping (unparseable) %r on %s: %s", value, page_url, e)
            return UrlClassification.skipped(SkipReason.INVALID)

    def looks_like_html(self, url: str) -> bool:
        """Guess from the last path segment's extension whether `url` is a page."""
        try:
            path = urlsplit(url).path
        except ValueError:
            return False
        segment = path.rsplit("/", 1)[-1]
        if "." not in segment:
            return True
        ext = "." + segment.rsplit(".", 1)[-1].lower()
        if ext in self.html_extensions:
            return True
        return ext not in self.non_html_extensions

    def is_same_domain(self, url: str, other: str) -> bool:
        """Hostname equality; scheme and port differences are ignored."""
        host = hostname_of(url)
        return host is not None and host == hostname_of(other)
