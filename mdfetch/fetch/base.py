from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class RawFetchResult:
    final_url: str
    status_code: int
    body: str
    content_type: str
    original_url: Optional[str] = None  # set only if a redirect occurred

    @property
    def redirected(self) -> bool:
        return self.original_url is not None

@dataclass(frozen=True)
class ExtractedContent:
    text: str  # full, untrimmed
    content_type: str
    status_code: int
    final_url: str
    original_url: Optional[str] = None

class BaseFetcher:
    async def fetch(self, url: str) -> RawFetchResult:
        raise NotImplementedError

    async def close(self):
        pass
