import logging
from typing import Any, Callable, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from brokenlinks.config import DEFAULT_MAX_PAGES, coerce_max_pages
from brokenlinks.domain.crawl_target import CrawlTarget
from brokenlinks.exceptions import InvalidSeedUrlError

logger = logging.getLogger(__name__)


class CheckLinksRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = None
    max_pages: Optional[Any] = Field(default=None, alias="maxPages")


def create_checks_router(crawl_executor_factory: Callable, default_max_pages: int = DEFAULT_MAX_PAGES):
    """Router for running a crawl synchronously and returning its summary.

    `crawl_executor_factory()` must return a fresh executor for each request.
    """
    router = APIRouter(prefix="/api", tags=["Checks"])

    @router.post("/check-links")
    def check_links(req: CheckLinksRequest):
        if not req.url:
            raise HTTPException(status_code=400, detail="URL is required")
        try:
            CrawlTarget.parse(req.url)
        except InvalidSeedUrlError:
            raise HTTPException(status_code=400, detail="Invalid URL format")

        max_pages = coerce_max_pages(req.max_pages, default=default_max_pages)
        try:
            summary = crawl_executor_factory().crawl(req.url, max_pages=max_pages)
        except InvalidSeedUrlError:
            raise HTTPException(status_code=400, detail="Invalid URL format")
        except Exception:
            logger.exception("Error checking links for %s", req.url)
            raise HTTPException(status_code=500, detail="Failed to check links")
        return summary.to_dict()

    return router
