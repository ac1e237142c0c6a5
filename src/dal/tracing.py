import hashlib
from typing import Any, Awaitable, Dict, Optional

from common.observability import is_feature_enabled


def trace_enabled() -> bool:
    """Return True when query tracing is enabled or OTEL exporter defaults apply."""
    return is_feature_enabled("SCHEMADOC_TRACE_QUERIES")


def _hash_sql(sql: str) -> str:
    return hashlib.sha256(sql.encode("utf-8")).hexdigest()


async def trace_query_operation(
    name: str,
    operation_label: str,
    sql: Optional[str],
    operation: Awaitable,
):
    """Trace a catalog or sample query with OTEL when enabled."""
    if not trace_enabled():
        return await operation

    from opentelemetry import trace

    tracer = trace.get_tracer("schemadoc")
    with tracer.start_as_current_span(name) as span:
        span.set_attribute("db.system", "postgresql")
        span.set_attribute("db.operation", operation_label)
        if sql:
            span.set_attribute("db.statement_hash", _hash_sql(sql))
        try:
            result = await operation
            span.set_attribute("db.status", "ok")
            return result
        except Exception:
            span.set_attribute("db.status", "error")
            raise


class TracedAsyncpgConnection:
    """Proxy for asyncpg connections that emits query tracing spans.

    ``fetch`` returns plain dicts so callers never depend on asyncpg.Record.
    """

    def __init__(self, conn: Any) -> None:
        """Initialize the traced connection wrapper."""
        self._conn = conn

    async def fetch(
        self, sql: str, *params: Any, operation_label: str = "query"
    ) -> list[Dict[str, Any]]:
        """Fetch rows with tracing when enabled."""

        async def _run():
            rows = await self._conn.fetch(sql, *params)
            return [dict(row) for row in rows]

        return await trace_query_operation(
            f"schemadoc.query.{operation_label}",
            operation_label=operation_label,
            sql=sql,
            operation=_run(),
        )
