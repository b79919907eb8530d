"""Shared test fixtures and configuration."""

import logging
import os

import pytest


# Complete test environment that overrides ALL possible config values
TEST_ENV = {
    "REDISEARCH_SCHEMA_NO_SAVE": "false",
    "REDISEARCH_SCHEMA_NO_FIELD_FLAGS": "false",
    "REDISEARCH_SCHEMA_NO_FREQUENCIES": "false",
    "REDISEARCH_SCHEMA_NO_OFFSET_VECTORS": "false",
    "REDISEARCH_SCHEMA_LOG_LEVEL": "info",
    "REDISEARCH_SCHEMA_LOG_JSON": "true",
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Reset schema settings variables and keep any local .env out of reach."""
    for key in list(os.environ):
        if key.upper().startswith("REDISEARCH_SCHEMA_"):
            monkeypatch.delenv(key, raising=False)
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
