import pytest

from brokenlinks.domain.classification import SkipReason
from brokenlinks.services.url_classifier import UrlClassifier, prefilter_reason

BASE = "https://example.com"
PAGE = "https://example.com/docs/guide/intro.html"


@pytest.fixture
def classifier():
    return UrlClassifier()


def test_root_relative_resolves_against_origin(classifier):
    result = classifier.classify("/a/b", BASE, "https://example.com/x")
    assert result.url == "https://example.com/a/b"
    assert classifier.classify("/a/b", BASE, PAGE).url == "https://example.com/a/b"


def test_page_relative_resolves_against_page(classifier):
    assert classifier.classify("next.html", BASE, PAGE).url == "https://example.com/docs/guide/next.html"
    assert classifier.classify("../api/", BASE, PAGE).url == "https://example.com/docs/api/"
    assert classifier.classify("?page=2", BASE, PAGE).url == "https://example.com/docs/guide/intro.html?page=2"


def test_absolute_urls_are_canonicalized(classifier):
    assert classifier.classify("HTTPS://Other.org", BASE, PAGE).url == "https://other.org/"
    assert classifier.classify(" http://example.com:80/a#frag ", BASE, PAGE).url == "http://example.com/a"


@pytest.mark.parametrize("url", [
    "https://example.com/",
    "https://example.com/a/b?x=1",
    "http://sub.example.com:8080/p",
])
def test_normalizing_canonical_urls_is_idempotent(classifier, url):
    assert classifier.classify(url, BASE, PAGE).url == url


def test_protocol_relative_href(classifier):
    assert classifier.classify("//cdn.example.net/lib", BASE, PAGE).url == "https://cdn.example.net/lib"


@pytest.mark.parametrize("href,reason", [
    ("", SkipReason.BLANK),
    ("   ", SkipReason.BLANK),
    ("#section", SkipReason.ANCHOR),
    ("#", SkipReason.ANCHOR),
    ("javascript:void(0)", SkipReason.JAVASCRIPT),
    ("JavaScript:alert(1)", SkipReason.JAVASCRIPT),
    ("mailto:x@y.com", SkipReason.INVALID),
    ("tel:+1234", SkipReason.INVALID),
    ("MAILTO:x@y.com", SkipReason.INVALID),
    ("ftp://files.example.com/a.txt", SkipReason.INVALID),
    ("data:text/plain,hi", SkipReason.INVALID),
    ("http://[::1", SkipReason.INVALID),
    ("http://example.com:badport/", SkipReason.INVALID),
    (None, SkipReason.INVALID),
    (42, SkipReason.INVALID),
])
def test_non_navigable_hrefs_are_skipped(classifier, href, reason):
    result = classifier.classify(href, BASE, PAGE)
    assert not result.is_resolved
    assert result.url is None
    assert result.reason == reason


def test_prefilter_reason():
    assert prefilter_reason("  ") == SkipReason.BLANK
    assert prefilter_reason("#x") == SkipReason.ANCHOR
    assert prefilter_reason("javascript:;") == SkipReason.JAVASCRIPT
    assert prefilter_reason("mailto:a@b") is None
    assert prefilter_reason("/page") is None


@pytest.mark.parametrize("url,expected", [
    ("https://example.com/", True),
    ("https://example.com/about", True),
    ("https://example.com/index.html", True),
    ("https://example.com/page.php?id=1", True),
    ("https://example.com/v1.2/notes", True),
    ("https://example.com/logo.PNG", False),
    ("https://example.com/files/report.pdf", False),
    ("https://example.com/static/app.js", False),
    ("https://example.com/static/site.css?v=3", False),
    ("https://example.com/fonts/a.woff2", False),
    ("https://example.com/feed.xml", False),
    ("https://example.com/data.json", False),
    ("https://example.com/archive.tar.gz", False),
    ("https://example.com/video.mp4", False),
])
def test_looks_like_html(classifier, url, expected):
    assert classifier.looks_like_html(url) is expected


def test_extension_lists_are_tunable():
    classifier = UrlClassifier(non_html_extensions=["php", ".ASPX"], html_extensions=[".xml"])
    assert not classifier.looks_like_html("https://example.com/page.php")
    assert not classifier.looks_like_html("https://example.com/page.aspx")
    assert classifier.looks_like_html("https://example.com/logo.png")
    assert classifier.looks_like_html("https://example.com/sitemap.xml")


def test_allow_list_overrides_default_deny_list():
    classifier = UrlClassifier(html_extensions=["json"])
    assert classifier.looks_like_html("https://example.com/api/page.json")
    assert not classifier.looks_like_html("https://example.com/logo.png")


def test_is_same_domain_compares_hostnames_only(classifier):
    assert classifier.is_same_domain("https://example.com/a", "http://example.com:8080/b")
    assert classifier.is_same_domain("https://EXAMPLE.com/a", "https://example.com/")
    assert not classifier.is_same_domain("https://blog.example.com/", "https://example.com/")
    assert not classifier.is_same_domain("https://other.org/", "https://example.com/")
    assert not classifier.is_same_domain("not a url", "https://example.com/")
    assert not classifier.is_same_domain("http://[::1", "https://example.com/")
