"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from brokenlinks import config as env
from brokenlinks.services.crawl_executor import CrawlExecutor
from brokenlinks.services.crawl_policy import CrawlPolicy
from brokenlinks.services.http_service import HttpService
from brokenlinks.services.link_status_checker import LinkStatusChecker
from brokenlinks.services.page_fetcher import PageFetcher
from brokenlinks.services.url_classifier import UrlClassifier


# Environment variables used by the container (read via `brokenlinks.config` helpers).
#
# USER_AGENT (str, default: "BrokenLinks/0.1")
#   User-Agent header for page fetches and link probes.
#
# PAGE_TIMEOUT (float seconds, default: 10)
#   Timeout for fetching a page's HTML.
#
# LINK_TIMEOUT (float seconds, default: 5)
#   Timeout for each HEAD/GET liveness probe.
#
# MAX_REDIRECTS (int, default: 5)
#   Redirects followed before a request is treated as failed.
#
# MAX_PAGES (int, default: 50)
#   Page ceiling per crawl when the caller does not supply one.
#
# BROKENLINKS_ALLOW_FORBIDDEN (bool, default: true)
#   Count 403 responses as valid links.
#
# BROKENLINKS_ENQUEUE_BEFORE_CHECK (bool, default: true)
#   Queue same-domain pages before their liveness check instead of after it.
#
# BROKENLINKS_LINK_CHECK_WORKERS (int, default: 1)
#   Threads used to check the links of one page; 1 keeps checks sequential.
#
# BROKENLINKS_MAX_DURATION_SECONDS (float seconds | optional)
#   Wall-clock budget for a whole crawl; no new pages are started once spent.
#
# BROKENLINKS_NON_HTML_EXTENSIONS / BROKENLINKS_HTML_EXTENSIONS (comma list | optional)
#   Override the extensions treated as assets / force-treated as pages.
#
# LOG_LEVEL (str, default: "INFO"), PORT (int, default: 5000)
#   Used by run.py.
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "BrokenLinks/0.1"),
    "PAGE_TIMEOUT": env.get_float_env("PAGE_TIMEOUT", 10.0),
    "LINK_TIMEOUT": env.get_float_env("LINK_TIMEOUT", 5.0),
    "MAX_REDIRECTS": env.get_int_env("MAX_REDIRECTS", 5),
    "MAX_PAGES": env.coerce_max_pages(env.get_optional_str_env("MAX_PAGES")),
    "BROKENLINKS_ALLOW_FORBIDDEN": env.get_bool_env("BROKENLINKS_ALLOW_FORBIDDEN", True),
    "BROKENLINKS_ENQUEUE_BEFORE_CHECK": env.get_bool_env("BROKENLINKS_ENQUEUE_BEFORE_CHECK", True),
    "BROKENLINKS_LINK_CHECK_WORKERS": env.get_int_env("BROKENLINKS_LINK_CHECK_WORKERS", 1),
    "BROKENLINKS_MAX_DURATION_SECONDS": env.get_optional_float_env("BROKENLINKS_MAX_DURATION_SECONDS"),
    "BROKENLINKS_NON_HTML_EXTENSIONS": env.get_list_env("BROKENLINKS_NON_HTML_EXTENSIONS"),
    "BROKENLINKS_HTML_EXTENSIONS": env.get_list_env("BROKENLINKS_HTML_EXTENSIONS"),
    "LOG_LEVEL": env.get_str_env("LOG_LEVEL", "INFO").strip().upper(),
    "PORT": env.get_int_env("PORT", 5000),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for the broken link checker."""

    # Configuration
    config = providers.Configuration(default=ENV)

    # Factories down to the session: each executor gets its own cookie jar and pool
    http_session = providers.Factory(requests.Session)

    http_service = providers.Factory(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        session=http_session,
        timeout=config.PAGE_TIMEOUT.as_(float),
        max_redirects=config.MAX_REDIRECTS.as_(int),
    )

    url_classifier = providers.Singleton(
        UrlClassifier,
        non_html_extensions=config.BROKENLINKS_NON_HTML_EXTENSIONS,
        html_extensions=config.BROKENLINKS_HTML_EXTENSIONS,
    )

    crawl_policy = providers.Singleton(
        CrawlPolicy,
        url_classifier=url_classifier,
        allow_forbidden=config.BROKENLINKS_ALLOW_FORBIDDEN.as_(bool),
        enqueue_before_check=config.BROKENLINKS_ENQUEUE_BEFORE_CHECK.as_(bool),
    )

    page_fetcher = providers.Factory(
        PageFetcher,
        http_service=http_service,
        timeout=config.PAGE_TIMEOUT.as_(float),
    )

    link_checker = providers.Factory(
        LinkStatusChecker,
        http_service=http_service,
        crawl_policy=crawl_policy,
        timeout=config.LINK_TIMEOUT.as_(float),
    )

    # Factory: every crawl gets its own executor and sessions; run state lives in CrawlContext
    crawl_executor = providers.Factory(
        CrawlExecutor,
        url_classifier=url_classifier,
        page_fetcher=page_fetcher,
        link_checker=link_checker,
        crawl_policy=crawl_policy,
        default_max_pages=config.MAX_PAGES.as_(int),
        max_duration_seconds=config.BROKENLINKS_MAX_DURATION_SECONDS,
        link_check_workers=config.BROKENLINKS_LINK_CHECK_WORKERS.as_(int),
    )
