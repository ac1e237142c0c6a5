"""Bounded, redacted row previews.

Binary and vector payloads never leave the server: their columns are replaced
in the SELECT list by fixed text placeholders, and each row is serialized to
JSON server-side so column names travel with the values.
"""

import logging
from enum import Enum
from typing import List, Sequence

from common.errors import SampleQueryError
from common.interfaces.sample_extractor import SampleExtractor
from dal.database import Database
from schema import ColumnDef

logger = logging.getLogger(__name__)

SAMPLE_ROW_LIMIT = 5

BYTEA_PLACEHOLDER = "[bytea]"
VECTOR_PLACEHOLDER = "[vector]"

BINARY_DATA_TYPES = frozenset({"bytea"})
VECTOR_UDT_NAMES = frozenset({"vector", "halfvec", "sparsevec"})


class ColumnRedaction(str, Enum):
    """How a column is projected into the sample query."""

    RAW = "raw"
    BINARY = "binary"
    VECTOR = "vector"


def classify_column(column: ColumnDef) -> ColumnRedaction:
    """Decide the redaction policy for one column from its catalog types."""
    if column.data_type.lower() in BINARY_DATA_TYPES:
        return ColumnRedaction.BINARY
    if column.udt_name.lower() in VECTOR_UDT_NAMES:
        return ColumnRedaction.VECTOR
    return ColumnRedaction.RAW


def quote_identifier(name: str) -> str:
    """Quote an identifier, doubling embedded double quotes."""
    return '"' + name.replace('"', '""') + '"'


def _placeholder_literal(text: str) -> str:
    return "'" + text.replace("'", "''") + "'::text"


def select_expression(column: ColumnDef) -> str:
    """Return the SELECT-list entry for one column."""
    redaction = classify_column(column)
    quoted = quote_identifier(column.name)
    if redaction is ColumnRedaction.BINARY:
        return f"{_placeholder_literal(BYTEA_PLACEHOLDER)} AS {quoted}"
    if redaction is ColumnRedaction.VECTOR:
        return f"{_placeholder_literal(VECTOR_PLACEHOLDER)} AS {quoted}"
    return quoted


def build_sample_query(
    table_name: str,
    columns: Sequence[ColumnDef],
    schema: str = "public",
    limit: int = SAMPLE_ROW_LIMIT,
) -> str:
    """Build the row-to-JSON sample query for one table.

    No ORDER BY is applied; rows come back in the server's natural order.
    """
    if not columns:
        raise ValueError("Cannot build a sample query without columns.")
    select_list = ", ".join(select_expression(col) for col in columns)
    source = f"{quote_identifier(schema)}.{quote_identifier(table_name)}"
    return (
        f"SELECT row_to_json(t)::text AS row_json "
        f"FROM (SELECT {select_list} FROM {source} LIMIT {int(limit)}) t"
    )


class PostgresSampleExtractor(SampleExtractor):
    """Best-effort sample fetcher; failures degrade to an empty list."""

    def __init__(self, schema: str = "public", limit: int = SAMPLE_ROW_LIMIT):
        self.schema = schema
        self.limit = limit

    async def _fetch_rows(self, table_name: str, columns: Sequence[ColumnDef]) -> List[str]:
        try:
            query = build_sample_query(table_name, columns, schema=self.schema, limit=self.limit)
            async with Database.get_connection() as conn:
                rows = await conn.fetch(query, operation_label="sample_rows")
        except Exception as e:
            raise SampleQueryError(table_name, str(e)) from e
        return [row["row_json"] for row in rows[: self.limit]]

    async def extract(self, table_name: str, columns: Sequence[ColumnDef]) -> List[str]:
        """Return up to ``limit`` JSON rows for the table, or [] on any failure."""
        if not columns:
            return []
        try:
            return await self._fetch_rows(table_name, columns)
        except SampleQueryError as e:
            logger.debug("Skipping sample data: %s", e)
            return []
