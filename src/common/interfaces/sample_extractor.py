from typing import List, Protocol, Sequence, runtime_checkable

from schema import ColumnDef


@runtime_checkable
class SampleExtractor(Protocol):
    """Protocol for fetching a bounded, redacted preview of table rows."""

    async def extract(self, table_name: str, columns: Sequence[ColumnDef]) -> List[str]:
        """Return at most a handful of serialized rows; never raises."""
        ...
