"""Shared fixtures: keep analytics output inside the test's tmp dir."""

from dataclasses import replace

import pytest

from passage_search.utils import config


@pytest.fixture(autouse=True)
def analytics_file(tmp_path, monkeypatch):
    path = tmp_path / "searches.jsonl"
    monkeypatch.setattr(config, "settings", replace(config.settings, analytics_file=str(path)))
    return path


@pytest.fixture
def package_level():
    """Restore the package logger level changed by a test."""
    from passage_search.utils.logger import PACKAGE_LOGGER, get_logger

    package = get_logger(PACKAGE_LOGGER)
    level = package.level
    yield package
    package.setLevel(level)
