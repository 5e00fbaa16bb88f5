"""
Exception hierarchy for mdfetch.

Fetch failures keep the underlying httpx exception as ``__cause__`` so callers
can inspect what actually went wrong.
"""
from typing import Optional


class MdFetchError(Exception):
    """Base class for every error raised by mdfetch."""


class ConfigError(MdFetchError):
    """Configuration values are missing or out of range."""


class InvalidInputError(MdFetchError):
    """Caller supplied arguments that are rejected before any network I/O."""


class FetchError(MdFetchError):
    """A single URL could not be fetched."""

    context = "failed to fetch"

    def __init__(self, url: str, reason: object = None):
        self.url = url
        self.reason = reason
        message = self.context if reason is None else f"{self.context}: {reason}"
        super().__init__(message)

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__


class RequestBuildError(FetchError):
    context = "failed to create request"


class TransportError(FetchError):
    context = "failed to execute request"


class RedirectLimitError(TransportError):
    context = "too many redirects"


class BodyReadError(FetchError):
    context = "failed to read response body"


class ExtractionError(MdFetchError):
    """Readability or Markdown conversion failed; always recovered from."""
