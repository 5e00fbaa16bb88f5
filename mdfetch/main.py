import logging

from fastapi import Depends, FastAPI
from contextlib import asynccontextmanager
from mdfetch.api.routes import get_service, router
from mdfetch.core.config import FetchConfig, settings
from mdfetch.core.logsetup import setup_logging
from mdfetch.services.fetch import FetchService

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Build the fetch service on startup, close its HTTP client on shutdown.
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    config = FetchConfig.from_settings()
    app.state.fetch_service = FetchService(config)
    logger.info("mdfetch started max_urls=%d max_workers=%d default_max_length=%d",
                config.max_urls, config.max_workers, config.default_max_length)

    yield

    logger.info("shutting down mdfetch")
    await app.state.fetch_service.close()
    app.state.fetch_service = None

app = FastAPI(
    title="mdfetch",
    description="Fetch web pages and return them as token-efficient Markdown",
    version="1.0.0",
    lifespan=lifespan
)

# Include API routes
app.include_router(router)

@app.get("/")
async def root(service: FetchService = Depends(get_service)):
    """Root endpoint with basic info"""
    config = service.config
    return {
        "service": "mdfetch",
        "version": "1.0.0",
        "endpoints": {
            "fetch": "POST /fetch",
            "fetch_multiple": "POST /fetch-multiple",
            "health": "GET /health"
        },
        "tools": {
            "fetch": (
                "Fetches a URL from the internet and extracts its contents as markdown. "
                f"Default max_length is {config.default_max_length}."
            ),
            "fetch_multiple": (
                f"Fetch content from multiple URLs (max {config.max_urls}). "
                f"Default max_length is {config.default_max_length}."
            ),
        },
        "max_urls": config.max_urls,
        "default_max_length": config.default_max_length,
    }
