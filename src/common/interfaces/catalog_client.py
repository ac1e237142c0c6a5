from typing import List, Protocol, runtime_checkable

from schema import ColumnDef, ForeignKeyDef


@runtime_checkable
class CatalogClient(Protocol):
    """Protocol for reading structural metadata from the database catalog.

    Every method raises ``CatalogQueryError`` on failure.
    """

    async def list_tables(self) -> List[str]:
        """List all table names in the inspected schema, in catalog order."""
        ...

    async def list_columns(self, table_name: str) -> List[ColumnDef]:
        """List columns of one table ordered by ordinal position."""
        ...

    async def list_primary_keys(self, table_name: str) -> List[str]:
        """List primary-key column names of one table."""
        ...

    async def list_foreign_keys(self, table_name: str) -> List[ForeignKeyDef]:
        """List one edge per referencing column of one table."""
        ...
