import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Union

from mdfetch.core.errors import FetchError
from mdfetch.fetch.base import BaseFetcher, ExtractedContent
from mdfetch.fetch.pipeline import ExtractionPipeline

logger = logging.getLogger(__name__)

@dataclass
class BatchResult:
    contents: Dict[str, ExtractedContent] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)


class Orchestrator:
    """
    Runs fetch + extract for many URLs with bounded concurrency.

    Each worker writes only its own slot in a list sized to the input, and
    the slots are merged into maps once every worker has finished. A failing
    URL never cancels its siblings.
    """

    def __init__(self, fetcher: BaseFetcher, pipeline: ExtractionPipeline, max_workers: int):
        self.fetcher = fetcher
        self.pipeline = pipeline
        self.max_workers = max_workers

    async def fetch_all(self, urls: List[str], raw: bool = False) -> BatchResult:
        if not urls:
            return BatchResult()

        workers = max(1, min(self.max_workers, len(urls)))
        semaphore = asyncio.Semaphore(workers)
        slots: List[Union[ExtractedContent, str]] = [""] * len(urls)
        logger.debug("fetching %d URLs with %d workers raw=%s", len(urls), workers, raw)

        async def work(index: int, url: str) -> None:
            async with semaphore:
                logger.debug("initiating fetch url=%s", url)
                try:
                    result = await self.fetcher.fetch(url)
                    # readability and markdownify are CPU bound
                    slots[index] = await asyncio.to_thread(self.pipeline.extract, result, raw)
                except FetchError as e:
                    logger.info("fetch failed url=%s error=%s", url, e)
                    slots[index] = str(e)
                except Exception as e:
                    logger.exception("unexpected failure url=%s", url)
                    slots[index] = f"internal error: {e}"

        await asyncio.gather(*(work(i, url) for i, url in enumerate(urls)))

        batch = BatchResult()
        for url, slot in zip(urls, slots):
            if isinstance(slot, ExtractedContent):
                batch.contents[url] = slot
            else:
                batch.errors[url] = slot
        return batch
