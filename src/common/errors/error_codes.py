"""Canonical error codes for the inspection run."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Bounded error codes surfaced in diagnostics and logs."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    DB_CONNECTION_ERROR = "DB_CONNECTION_ERROR"
    CATALOG_QUERY_ERROR = "CATALOG_QUERY_ERROR"
    SAMPLE_QUERY_ERROR = "SAMPLE_QUERY_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


def parse_error_code(
    value: Any,
    *,
    fallback: ErrorCode = ErrorCode.INTERNAL_ERROR,
) -> ErrorCode:
    """Parse string-like values to `ErrorCode` with safe fallback."""
    if isinstance(value, ErrorCode):
        return value
    if value is None:
        return fallback
    try:
        return ErrorCode(str(value).strip())
    except ValueError:
        return fallback
