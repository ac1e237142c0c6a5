import logging
from typing import Iterable, List, Optional

from common.interfaces import CatalogClient, SampleExtractor
from schema import SchemaSnapshot, TableDef

logger = logging.getLogger(__name__)


class SchemaInspector:
    """Drives one sequential inspection pass over the catalog.

    Structural metadata failures (``CatalogQueryError``) propagate and abort
    the whole scan; the sample extractor swallows its own failures.
    """

    def __init__(
        self,
        catalog: CatalogClient,
        sample_extractor: Optional[SampleExtractor] = None,
        collect_samples: bool = True,
        ignore_tables: Optional[Iterable[str]] = None,
        schema_name: str = "public",
    ):
        self.catalog = catalog
        self.sample_extractor = sample_extractor
        self.collect_samples = collect_samples
        self.ignore_tables = frozenset(ignore_tables or ())
        self.schema_name = schema_name

    async def scan(self) -> SchemaSnapshot:
        """Inspect every non-ignored table in catalog order."""
        table_names = await self.catalog.list_tables()

        tables: List[TableDef] = []
        for table_name in table_names:
            if table_name in self.ignore_tables:
                logger.debug("Ignoring table %s", table_name)
                continue
            tables.append(await self._inspect_table(table_name))

        logger.info("Inspected %d of %d tables", len(tables), len(table_names))
        return SchemaSnapshot(schema_name=self.schema_name, tables=tables)

    async def _inspect_table(self, table_name: str) -> TableDef:
        columns = await self.catalog.list_columns(table_name)
        primary_keys = await self.catalog.list_primary_keys(table_name)
        foreign_keys = await self.catalog.list_foreign_keys(table_name)

        sample_rows: List[str] = []
        if self.collect_samples and self.sample_extractor is not None and columns:
            sample_rows = await self.sample_extractor.extract(table_name, columns)

        return TableDef(
            name=table_name,
            columns=columns,
            primary_keys=primary_keys,
            foreign_keys=foreign_keys,
            sample_rows=sample_rows,
        )
