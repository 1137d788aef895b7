"""FastAPI application factory."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from brokenlinks import __version__
from brokenlinks.api.routers import create_checks_router, create_systems_router
from brokenlinks.container import Container


def create_app(container: Container = None) -> FastAPI:
    """Return a FastAPI app whose routes pull collaborators from `container`."""
    container = container or Container()
    app = FastAPI(
        title="Broken Link Checker",
        description="Crawls a site from a seed URL and reports broken links per page.",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.state.container = container

    app.include_router(
        create_checks_router(
            container.crawl_executor,
            default_max_pages=container.config.MAX_PAGES(),
        )
    )
    app.include_router(create_systems_router(container.config()))
    return app
