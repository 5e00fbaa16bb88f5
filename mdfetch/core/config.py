import os
from dataclasses import dataclass
from typing import Optional

from mdfetch.core.errors import ConfigError

class Settings:
    # Fetching
    FETCH_TIMEOUT: int = int(os.getenv("FETCH_TIMEOUT", "10"))
    FETCH_USER_AGENT: str = os.getenv("FETCH_USER_AGENT", "mdfetch/1.0")
    FETCH_MAX_URLS: int = int(os.getenv("FETCH_MAX_URLS", "20"))
    FETCH_MAX_WORKERS: int = int(os.getenv("FETCH_MAX_WORKERS", "20"))
    FETCH_DEFAULT_MAX_LENGTH: int = int(os.getenv("FETCH_DEFAULT_MAX_LENGTH", "5000"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE")

settings = Settings()


@dataclass(frozen=True)
class FetchConfig:
    """Validated fetch settings handed to each component's constructor."""

    timeout_seconds: int = 10
    user_agent: str = "mdfetch/1.0"
    max_urls: int = 20
    max_workers: int = 20
    default_max_length: int = 5000

    def __post_init__(self):
        if self.timeout_seconds <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout_seconds}")
        if not self.user_agent:
            raise ConfigError("user agent must not be empty")
        if self.max_urls <= 0:
            raise ConfigError(f"max_urls must be positive, got {self.max_urls}")
        if self.max_workers <= 0:
            raise ConfigError(f"max_workers must be positive, got {self.max_workers}")
        if self.default_max_length <= 0:
            raise ConfigError(f"default_max_length must be positive, got {self.default_max_length}")

    @classmethod
    def from_settings(cls, s: Settings = settings) -> "FetchConfig":
        return cls(
            timeout_seconds=s.FETCH_TIMEOUT,
            user_agent=s.FETCH_USER_AGENT,
            max_urls=s.FETCH_MAX_URLS,
            max_workers=s.FETCH_MAX_WORKERS,
            default_max_length=s.FETCH_DEFAULT_MAX_LENGTH,
        )
