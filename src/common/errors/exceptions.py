"""Exception hierarchy for schema inspection.

Structural failures (configuration, connection, catalog queries) abort the
run. Sample failures are recovered inside the sample extractor and never
reach the caller.
"""

from __future__ import annotations

from typing import Optional

from common.errors.error_codes import ErrorCode


class SchemaDocError(Exception):
    """Base class for all inspection errors."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR


class ConfigurationError(SchemaDocError):
    """Connection string missing or unusable."""

    code = ErrorCode.CONFIGURATION_ERROR


class DatabaseConnectionError(SchemaDocError):
    """Pool or connection establishment failed."""

    code = ErrorCode.DB_CONNECTION_ERROR


class CatalogQueryError(SchemaDocError):
    """A structural metadata query failed.

    The underlying driver error is chained as ``__cause__`` by the raiser.
    """

    code = ErrorCode.CATALOG_QUERY_ERROR

    def __init__(self, operation: str, table_name: Optional[str] = None, message: str = ""):
        self.operation = operation
        self.table_name = table_name
        target = f" for table '{table_name}'" if table_name else ""
        detail = f": {message}" if message else ""
        super().__init__(f"Catalog query '{operation}' failed{target}{detail}")


class SampleQueryError(SchemaDocError):
    """Fetching sample rows for one table failed."""

    code = ErrorCode.SAMPLE_QUERY_ERROR

    def __init__(self, table_name: str, message: str = ""):
        self.table_name = table_name
        detail = f": {message}" if message else ""
        super().__init__(f"Sample query failed for table '{table_name}'{detail}")
