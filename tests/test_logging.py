from __future__ import annotations

import structlog

from portfolio.core.config import get_settings
from portfolio.core.logging import configure_logging


def test_configure_logging_is_stable_across_calls(settings_env, monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "json")
    get_settings.cache_clear()
    configure_logging()
    first = structlog.get_config()
    configure_logging()
    second = structlog.get_config()
    assert first["cache_logger_on_first_use"] is True
    assert second["cache_logger_on_first_use"] is True
    assert isinstance(second["processors"][-1], structlog.processors.JSONRenderer)
