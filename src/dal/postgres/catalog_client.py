import logging
from typing import Any, Dict, List, Optional

from common.errors import CatalogQueryError
from common.interfaces.catalog_client import CatalogClient
from common.sanitization import redact_sensitive_info
from dal.database import Database
from schema import ColumnDef, ForeignKeyDef

logger = logging.getLogger(__name__)

LIST_TABLES_SQL = """
    SELECT table_name
    FROM information_schema.tables
    WHERE table_schema = $1
"""

LIST_COLUMNS_SQL = """
    SELECT column_name, data_type, is_nullable, udt_name
    FROM information_schema.columns
    WHERE table_name = $1 AND table_schema = $2
    ORDER BY ordinal_position
"""

LIST_PRIMARY_KEYS_SQL = """
    SELECT kcu.column_name
    FROM information_schema.table_constraints AS tc
    JOIN information_schema.key_column_usage AS kcu
        ON tc.constraint_name = kcu.constraint_name
        AND tc.table_schema = kcu.table_schema
        AND tc.table_name = kcu.table_name
    WHERE tc.constraint_type = 'PRIMARY KEY'
        AND tc.table_name = $1
        AND tc.table_schema = $2
    ORDER BY kcu.ordinal_position
"""

LIST_FOREIGN_KEYS_SQL = """
    SELECT
        kcu.column_name,
        ref.table_name AS foreign_table_name,
        ref.column_name AS foreign_column_name
    FROM information_schema.key_column_usage AS kcu
    JOIN information_schema.referential_constraints AS rc
        ON kcu.constraint_name = rc.constraint_name
        AND kcu.constraint_schema = rc.constraint_schema
    JOIN information_schema.key_column_usage AS ref
        ON rc.unique_constraint_name = ref.constraint_name
        AND rc.unique_constraint_schema = ref.constraint_schema
        AND ref.ordinal_position = kcu.position_in_unique_constraint
    WHERE kcu.table_name = $1
        AND kcu.table_schema = $2
    ORDER BY kcu.constraint_name, kcu.ordinal_position
"""


class PostgresCatalogClient(CatalogClient):
    """Postgres implementation of CatalogClient using information_schema."""

    def __init__(self, schema: str = "public"):
        self.schema = schema

    async def _fetch(
        self, operation: str, sql: str, *params: Any, table_name: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        try:
            async with Database.get_connection() as conn:
                return await conn.fetch(sql, *params, operation_label=operation)
        except Exception as e:
            raise CatalogQueryError(
                operation, table_name=table_name, message=redact_sensitive_info(str(e))
            ) from e

    async def list_tables(self) -> List[str]:
        """List all table names in the inspected schema, in catalog order."""
        rows = await self._fetch("list_tables", LIST_TABLES_SQL, self.schema)
        logger.debug("Found %d tables in schema %s", len(rows), self.schema)
        return [row["table_name"] for row in rows]

    async def list_columns(self, table_name: str) -> List[ColumnDef]:
        """List columns of one table ordered by ordinal position."""
        rows = await self._fetch(
            "list_columns", LIST_COLUMNS_SQL, table_name, self.schema, table_name=table_name
        )
        return [
            ColumnDef(
                name=row["column_name"],
                data_type=row["data_type"],
                udt_name=row.get("udt_name") or "",
                is_nullable=(row["is_nullable"] == "YES"),
            )
            for row in rows
        ]

    async def list_primary_keys(self, table_name: str) -> List[str]:
        """List primary-key column names of one table in key order."""
        rows = await self._fetch(
            "list_primary_keys",
            LIST_PRIMARY_KEYS_SQL,
            table_name,
            self.schema,
            table_name=table_name,
        )
        keys: List[str] = []
        for row in rows:
            if row["column_name"] not in keys:
                keys.append(row["column_name"])
        return keys

    async def list_foreign_keys(self, table_name: str) -> List[ForeignKeyDef]:
        """List one edge per referencing column of one table."""
        rows = await self._fetch(
            "list_foreign_keys",
            LIST_FOREIGN_KEYS_SQL,
            table_name,
            self.schema,
            table_name=table_name,
        )
        return [
            ForeignKeyDef(
                column_name=row["column_name"],
                foreign_table_name=row["foreign_table_name"],
                foreign_column_name=row["foreign_column_name"],
            )
            for row in rows
        ]
