"""Sanitization helpers for user-facing diagnostics."""

from __future__ import annotations

import re
from typing import Any

from common.errors.error_codes import ErrorCode, parse_error_code
from common.sanitization.text import redact_sensitive_info

MAX_PUBLIC_ERROR_LENGTH = 2048

_FALLBACK_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.CONFIGURATION_ERROR: "Invalid configuration.",
    ErrorCode.DB_CONNECTION_ERROR: "Database connection failed.",
    ErrorCode.CATALOG_QUERY_ERROR: "Catalog metadata query failed.",
    ErrorCode.SAMPLE_QUERY_ERROR: "Sample query failed.",
    ErrorCode.INTERNAL_ERROR: "An internal error occurred.",
}

_MULTI_SPACE_RE = re.compile(r"\s+")


def sanitize_error_message(message: Any, *, error_code: Any = None) -> str:
    """Return single-line diagnostic text with credentials redacted."""
    code = parse_error_code(error_code)
    raw_text = "" if message is None else str(message)
    safe_text = redact_sensitive_info(raw_text)
    safe_text = _MULTI_SPACE_RE.sub(" ", safe_text).strip()
    if not safe_text:
        safe_text = _FALLBACK_MESSAGES[code]
    return safe_text[:MAX_PUBLIC_ERROR_LENGTH]


def sanitize_exception(exc: BaseException) -> str:
    """Sanitize an exception, using its ``code`` attribute when present."""
    code = getattr(exc, "code", ErrorCode.INTERNAL_ERROR)
    return sanitize_error_message(str(exc), error_code=code)
