from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

class FetchRequest(BaseModel):
    url: str
    max_length: int = Field(0, description="Maximum number of characters to return (0 = default)")
    start_index: int = Field(0, description="Start content from this character index")
    raw: bool = Field(False, description="Get raw content without markdown conversion")

class BatchFetchRequest(BaseModel):
    urls: List[str] = Field(description="URLs to fetch")
    max_length: int = Field(0, description="Maximum total number of characters across all URLs (0 = default)")
    raw: bool = Field(False, description="Get raw content without markdown conversion")

class FetchResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    content_type: str = ""
    content: str
    status_code: int
    original_url: Optional[str] = Field(None, description="Requested URL, set only if a redirect occurred")

class BatchFetchResponse(BaseModel):
    responses: Dict[str, FetchResponse] = Field(default_factory=dict)
    errors: Dict[str, str] = Field(default_factory=dict)
