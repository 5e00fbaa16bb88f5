import asyncio
import logging
from typing import List, Optional

import httpx

from mdfetch.core.config import FetchConfig
from mdfetch.core.errors import InvalidInputError
from mdfetch.fetch.base import BaseFetcher
from mdfetch.fetch.http_fetcher import HttpxFetcher
from mdfetch.fetch.pipeline import ExtractionPipeline
from mdfetch.fetch.utils import select_window
from mdfetch.schemas import BatchFetchResponse, FetchResponse
from mdfetch.services.allocator import allocate
from mdfetch.services.orchestrator import Orchestrator

logger = logging.getLogger(__name__)

class FetchService:
    """The two public operations: fetch one URL, or fetch many under one budget."""

    def __init__(
        self,
        config: FetchConfig,
        fetcher: Optional[BaseFetcher] = None,
        pipeline: Optional[ExtractionPipeline] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.fetcher = fetcher or HttpxFetcher(config, transport=transport)
        self.pipeline = pipeline or ExtractionPipeline()
        self.orchestrator = Orchestrator(self.fetcher, self.pipeline, config.max_workers)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        await self.fetcher.close()

    async def fetch(self, url: str, max_length: int = 0, start_index: int = 0, raw: bool = False) -> FetchResponse:
        """
        Fetch a single URL and return the requested window of its content.

        ``max_length <= 0`` returns everything from ``start_index`` on.
        Fetch failures propagate as :class:`mdfetch.core.errors.FetchError`.
        """
        if not url:
            raise InvalidInputError("URL is required")

        logger.debug("fetching URL url=%s max_length=%d start_index=%d raw=%s", url, max_length, start_index, raw)
        result = await self.fetcher.fetch(url)
        extracted = await asyncio.to_thread(self.pipeline.extract, result, raw)

        content = select_window(extracted.text, start_index, max_length)
        if len(content) != len(extracted.text):
            logger.debug(
                "content trimmed original_length=%d start_index=%d trimmed_length=%d",
                len(extracted.text), start_index, len(content),
            )

        return FetchResponse(
            url=extracted.final_url,
            content_type=extracted.content_type,
            content=content,
            status_code=extracted.status_code,
            original_url=extracted.original_url,
        )

    async def fetch_multiple(self, urls: List[str], max_length: int = 0, raw: bool = False) -> BatchFetchResponse:
        """
        Fetch every URL in parallel and split ``max_length`` characters across them.

        Per-URL failures end up in ``errors``; this method only raises for
        invalid input.
        """
        if not urls:
            raise InvalidInputError("at least one URL is required")
        if len(urls) > self.config.max_urls:
            raise InvalidInputError(f"too many URLs: maximum allowed is {self.config.max_urls}")
        if any(not u for u in urls):
            raise InvalidInputError("URL is required")
        if max_length <= 0:
            max_length = self.config.default_max_length

        unique_urls = list(dict.fromkeys(urls))
        logger.debug(
            "fetching multiple URLs count=%d max_length=%d raw=%s workers=%d",
            len(unique_urls), max_length, raw, self.config.max_workers,
        )

        batch = await self.orchestrator.fetch_all(unique_urls, raw=raw)
        trimmed = allocate(
            {url: c.text for url, c in batch.contents.items()},
            max_length,
            self.config.default_max_length,
        )

        response = BatchFetchResponse(errors=dict(batch.errors))
        for url, content in batch.contents.items():
            response.responses[url] = FetchResponse(
                url=content.final_url,
                content_type=content.content_type,
                content=trimmed[url],
                status_code=content.status_code,
                original_url=content.original_url,
            )

        logger.info(
            "completed fetching multiple URLs requested=%d successful=%d errors=%d total_content_length=%d max_length=%d",
            len(unique_urls), len(response.responses), len(response.errors),
            sum(len(r.content) for r in response.responses.values()), max_length,
        )
        return response
