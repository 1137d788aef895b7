from fastapi import APIRouter

# config key -> response field
CRAWL_SETTINGS = {
    "MAX_PAGES": "maxPages",
    "PAGE_TIMEOUT": "pageTimeout",
    "LINK_TIMEOUT": "linkTimeout",
    "MAX_REDIRECTS": "maxRedirects",
    "BROKENLINKS_ALLOW_FORBIDDEN": "allowForbidden",
    "BROKENLINKS_ENQUEUE_BEFORE_CHECK": "enqueueBeforeCheck",
    "BROKENLINKS_LINK_CHECK_WORKERS": "linkCheckWorkers",
    "BROKENLINKS_MAX_DURATION_SECONDS": "maxDurationSeconds",
}


def create_systems_router(settings: dict):
    """Health probe plus a read-only view of the settings a crawl runs with."""
    router = APIRouter(prefix="/api", tags=["System"])
    crawl_settings = {field: settings.get(key) for key, field in CRAWL_SETTINGS.items()}

    @router.get("/health")
    def health():
        return {"status": "ok"}

    @router.get("/config")
    def get_config():
        return {"crawl": dict(crawl_settings)}

    return router
