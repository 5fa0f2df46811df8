"""Shared fixtures for candleplot tests."""

import logging

import pytest


SAMPLE_CSV = (
    "Timestamp,Open,High,Low,Close,Volume\n"
    "2023-01-01 00:00:00,100.0,105.0,95.0,102.0,1000.0\n"
    "2023-01-02 00:00:00,102.0,108.0,101.0,106.0,1200.0\n"
    "2023-01-03 00:00:00,106.0,110.0,104.0,108.0,1500.0\n"
    "2023-01-04 00:00:00,108.0,112.0,106.0,110.0,1800.0\n"
    "2023-01-05 00:00:00,110.0,115.0,108.0,112.0,2000.0\n"
)


@pytest.fixture
def restore_root_logger():
    """Undo handler changes made by setup_logging during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_csv(tmp_path):
    """Write the five-day sample dataset and return its path."""
    path = tmp_path / "sample.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the config lookup at a file that does not exist."""
    monkeypatch.setenv("CANDLEPLOT_CONFIG", str(tmp_path / "missing-config.toml"))
