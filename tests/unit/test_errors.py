import logging

import pytest
from mdfetch.core.errors import (
    BodyReadError,
    FetchError,
    MdFetchError,
    RedirectLimitError,
    RequestBuildError,
    TransportError,
)
from mdfetch.core.logsetup import setup_logging

class TestFetchErrors:
    """Unit tests for error wrapping"""

    def test_message_wraps_reason(self):
        err = BodyReadError("https://a.com", "connection reset")
        assert str(err) == "failed to read response body: connection reset"
        assert err.url == "https://a.com"

    def test_message_without_reason(self):
        assert str(RequestBuildError("x")) == "failed to create request"

    def test_cause_is_preserved(self):
        base = OSError("base error")
        with pytest.raises(TransportError) as exc_info:
            try:
                raise base
            except OSError as e:
                raise TransportError("https://a.com", e) from e
        assert exc_info.value.cause is base
        assert str(exc_info.value) == "failed to execute request: base error"

    def test_cause_is_none_when_not_chained(self):
        assert RequestBuildError("x", "bad scheme").cause is None

    def test_hierarchy(self):
        for cls in (RequestBuildError, TransportError, BodyReadError, RedirectLimitError):
            assert issubclass(cls, FetchError)
            assert issubclass(cls, MdFetchError)
        assert issubclass(RedirectLimitError, TransportError)

class TestSetupLogging:
    """Unit tests for logging configuration"""

    def test_level_and_quiet_httpx(self):
        setup_logging("debug")
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "mdfetch.log"
        setup_logging("INFO", str(log_file))
        logging.getLogger("mdfetch.test").info("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")
        setup_logging("INFO")
