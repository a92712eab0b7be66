"""Unit tests for logging helpers and settings."""

import json
import logging
from dataclasses import replace

from passage_search.utils import config
from passage_search.utils.config import Settings
from passage_search.utils.logger import PACKAGE_LOGGER, get_logger, log_search, set_level


def test_log_search_appends_jsonl(analytics_file):
    log_search("Genesis 1:1", "video", ["a", "b"], 3, "ok", 12.345)
    log_search("Genesis 1:1", "video", ["c"], 0, "empty_queries", 1.0)

    lines = analytics_file.read_text().splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first["provider"] == "video"
    assert first["queries"] == ["a", "b"]
    assert first["result_count"] == 3
    assert first["response_time_ms"] == 12.3
    assert "timestamp" in first


def test_log_search_disabled_without_file(monkeypatch, analytics_file):
    monkeypatch.setattr(config, "settings", replace(config.settings, analytics_file=""))
    log_search(None, "video", [], 0, "ok", 0.0)
    assert not analytics_file.exists()


def test_module_loggers_share_package_handlers():
    a = get_logger("passage_search.test")
    b = get_logger("passage_search.test")
    package = logging.getLogger(PACKAGE_LOGGER)
    assert a is b
    assert a.parent is package
    assert a.handlers == []
    assert isinstance(package.handlers[0], logging.StreamHandler)


def test_outside_names_nest_under_package():
    assert get_logger("__main__").name == "passage_search.__main__"


def test_set_level_reaches_existing_module_loggers(package_level):
    child = get_logger("passage_search.providers.base")
    set_level("DEBUG")
    assert child.isEnabledFor(logging.DEBUG)
    set_level(logging.WARNING)
    assert not child.isEnabledFor(logging.INFO)


def test_settings_read_from_env(monkeypatch):
    monkeypatch.setenv("OPENAI_QUERY_MODEL", "gpt-test")
    monkeypatch.setenv("QUERY_MAX_TOKENS", "64")
    monkeypatch.setenv("HTTP_TIMEOUT", "2.5")
    s = Settings()
    assert s.query_model == "gpt-test"
    assert s.query_max_tokens == 64
    assert s.http_timeout == 2.5


def test_http_timeout_defaults_to_none(monkeypatch):
    monkeypatch.delenv("HTTP_TIMEOUT", raising=False)
    assert Settings().http_timeout is None
