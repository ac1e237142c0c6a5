"""Unit test environment helpers."""

import pytest

_ISOLATED_ENV_VARS = (
    "DB_URL",
    "LOG_LEVEL",
    "SCHEMADOC_COLLECT_SAMPLES",
    "SCHEMADOC_IGNORE_TABLES",
    "SCHEMADOC_SCHEMA",
    "SCHEMADOC_POOL_MAX_SIZE",
    "SCHEMADOC_COMMAND_TIMEOUT",
    "SCHEMADOC_TRACE_QUERIES",
    "OTEL_EXPORTER_OTLP_ENDPOINT",
    "OTEL_EXPORTER_OTLP_TRACES_ENDPOINT",
)


@pytest.fixture(autouse=True)
def _minimal_env(monkeypatch):
    """Keep host environment and .env files from leaking into unit tests."""
    for name in _ISOLATED_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("schemadoc.config.load_dotenv", lambda **kwargs: False)
    monkeypatch.setattr("schemadoc.cli.load_dotenv", lambda **kwargs: False)
    yield


@pytest.fixture(autouse=True)
def _reset_database_state():
    """Reset global Database state after each test."""
    from dal.database import Database

    original_pool = Database._pool
    yield
    Database._pool = original_pool
