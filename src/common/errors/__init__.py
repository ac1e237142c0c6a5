"""Common error taxonomy helpers."""

from common.errors.error_codes import ErrorCode, parse_error_code
from common.errors.exceptions import (
    CatalogQueryError,
    ConfigurationError,
    DatabaseConnectionError,
    SampleQueryError,
    SchemaDocError,
)
from common.errors.sanitization import sanitize_error_message, sanitize_exception

__all__ = [
    "CatalogQueryError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "ErrorCode",
    "SampleQueryError",
    "SchemaDocError",
    "parse_error_code",
    "sanitize_error_message",
    "sanitize_exception",
]
