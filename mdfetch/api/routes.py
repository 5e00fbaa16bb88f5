import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from mdfetch.core.errors import FetchError, InvalidInputError
from mdfetch.schemas import BatchFetchRequest, BatchFetchResponse, FetchRequest, FetchResponse
from mdfetch.services.fetch import FetchService

logger = logging.getLogger(__name__)

router = APIRouter()

def get_service(request: Request) -> FetchService:
    return request.app.state.fetch_service

@router.post("/fetch", response_model=FetchResponse, response_model_exclude_none=True)
async def fetch_url(body: FetchRequest, service: FetchService = Depends(get_service)):
    """
    Fetch a URL and return its content as Markdown.

    When max_length is not given, the configured default applies.
    """
    logger.info("executing fetch url=%s max_length=%d start_index=%d raw=%s",
                body.url, body.max_length, body.start_index, body.raw)

    max_length = body.max_length
    if max_length <= 0:
        max_length = service.config.default_max_length

    try:
        return await service.fetch(body.url, max_length, body.start_index, body.raw)
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except FetchError as e:
        logger.error("failed to fetch URL url=%s error=%s", body.url, e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"failed to fetch URL: {e}"
        )

@router.post("/fetch-multiple", response_model=BatchFetchResponse, response_model_exclude_none=True)
async def fetch_multiple_urls(body: BatchFetchRequest, service: FetchService = Depends(get_service)):
    """
    Fetch several URLs in parallel.

    max_length is the total number of characters across all URLs combined.
    Per-URL failures are reported in the "errors" map.
    """
    logger.debug("executing fetch_multiple urls_count=%d max_length=%d raw=%s",
                 len(body.urls), body.max_length, body.raw)
    try:
        return await service.fetch_multiple(body.urls, body.max_length, body.raw)
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "mdfetch"}
