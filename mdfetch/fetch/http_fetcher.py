import asyncio
import logging
from typing import Optional

import httpx

from mdfetch.core.config import FetchConfig
from mdfetch.core.errors import BodyReadError, RedirectLimitError, RequestBuildError, TransportError
from .base import BaseFetcher, RawFetchResult

logger = logging.getLogger(__name__)

MAX_REDIRECTS = 10

class HttpxFetcher(BaseFetcher):
    """Single-URL fetcher sharing one lazily created httpx.AsyncClient."""

    def __init__(self, config: FetchConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None
        logger.info(
            "creating HTTP fetcher timeout=%ss user_agent=%r max_redirects=%d",
            config.timeout_seconds, config.user_agent, MAX_REDIRECTS,
        )

    async def __aenter__(self):
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        if self.client:
            await self.client.aclose()
            self.client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        if self.client is None:
            self.client = httpx.AsyncClient(
                timeout=self.config.timeout_seconds,
                headers={"User-Agent": self.config.user_agent},
                follow_redirects=True,
                max_redirects=MAX_REDIRECTS,
                transport=self.transport,
            )
        return self.client

    async def fetch(self, url: str) -> RawFetchResult:
        """
        Perform one GET and return the whole decoded body.

        The configured timeout bounds the entire request, body read included.
        Non-2xx responses are returned as-is, not raised.
        """
        client = self._ensure_client()

        try:
            request = client.build_request("GET", url)
        except (httpx.InvalidURL, ValueError) as e:
            raise RequestBuildError(url, e) from e
        if request.url.scheme not in ("http", "https"):
            raise RequestBuildError(url, f"unsupported URL scheme {request.url.scheme!r}")

        timeout = self.config.timeout_seconds
        try:
            response = await asyncio.wait_for(self._send(client, request, url), timeout)
        except asyncio.TimeoutError as e:
            raise TransportError(url, f"request timed out after {timeout}s") from e

        content_type = response.headers.get("content-type", "")
        final_url = str(response.url)
        logger.debug(
            "response received url=%s status=%d bytes=%d content_type=%s",
            url, response.status_code, len(response.content), content_type,
        )

        original_url = None
        if response.history:
            original_url = url
            logger.debug("redirected url=%s final_url=%s hops=%d", url, final_url, len(response.history))

        return RawFetchResult(
            final_url=final_url,
            status_code=response.status_code,
            body=response.text,
            content_type=content_type,
            original_url=original_url,
        )

    async def _send(self, client: httpx.AsyncClient, request: httpx.Request, url: str) -> httpx.Response:
        try:
            response = await client.send(request, stream=True)
        except httpx.TooManyRedirects as e:
            raise RedirectLimitError(url, f"stopped after {MAX_REDIRECTS} redirects") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # InvalidURL here comes from a malformed Location header
            raise TransportError(url, e) from e

        try:
            await response.aread()
        except httpx.HTTPError as e:
            raise BodyReadError(url, e) from e
        finally:
            await response.aclose()
        return response
