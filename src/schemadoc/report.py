import logging

from dal.database import Database
from dal.postgres import PostgresCatalogClient, PostgresSampleExtractor
from schema import SchemaSnapshot
from schemadoc.config import ReportConfig
from schemadoc.inspector import SchemaInspector
from schemadoc.renderer import render_markdown

logger = logging.getLogger(__name__)


async def collect_snapshot(config: ReportConfig) -> SchemaSnapshot:
    """Run one inspection pass against an initialized pool."""
    inspector = SchemaInspector(
        catalog=PostgresCatalogClient(schema=config.schema_name),
        sample_extractor=PostgresSampleExtractor(schema=config.schema_name),
        collect_samples=config.collect_samples,
        ignore_tables=config.ignore_tables,
        schema_name=config.schema_name,
    )
    return await inspector.scan()


async def generate_report(config: ReportConfig) -> str:
    """Connect, scan and render in one go; the pool is always closed."""
    await Database.init(
        config.db_url,
        max_size=config.pool_max_size,
        command_timeout=config.command_timeout,
    )
    try:
        snapshot = await collect_snapshot(config)
    finally:
        await Database.close()

    return render_markdown(config.db_name, snapshot)
