from brokenlinks.api.app import create_app
from brokenlinks.api.routers.systems import create_systems_router
from brokenlinks.container import Container


def _get_endpoint(router, path: str, method: str):
    for route in router.routes:
        if getattr(route, "path", None) == path and method.upper() in getattr(route, "methods", set()):
            return route.endpoint
    raise AssertionError(f"No route found for {method} {path}")


def test_health():
    router = create_systems_router({})
    assert _get_endpoint(router, "/api/health", "GET")() == {"status": "ok"}


def test_config_exposes_only_crawl_settings():
    router = create_systems_router({
        "MAX_PAGES": 50,
        "LINK_TIMEOUT": 5.0,
        "BROKENLINKS_ALLOW_FORBIDDEN": True,
        "BROKENLINKS_MAX_DURATION_SECONDS": None,
        "USER_AGENT": "Secret/1.0",
        "PORT": 5000,
    })
    body = _get_endpoint(router, "/api/config", "GET")()["crawl"]
    assert body["maxPages"] == 50
    assert body["linkTimeout"] == 5.0
    assert body["allowForbidden"] is True
    assert body["maxDurationSeconds"] is None
    assert body["pageTimeout"] is None
    assert "Secret/1.0" not in body.values()
    assert 5000 not in body.values()


def test_app_config_reflects_container_settings():
    container = Container()
    container.config.MAX_PAGES.from_value(12)
    container.config.BROKENLINKS_LINK_CHECK_WORKERS.from_value(4)
    app = create_app(container)
    get_config = next(r.endpoint for r in app.routes if getattr(r, "path", None) == "/api/config")
    body = get_config()["crawl"]
    assert body["maxPages"] == 12
    assert body["linkCheckWorkers"] == 4
