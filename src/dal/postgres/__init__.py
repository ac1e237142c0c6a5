"""PostgreSQL catalog and sample access."""

from .catalog_client import PostgresCatalogClient
from .sample_extractor import PostgresSampleExtractor

__all__ = [
    "PostgresCatalogClient",
    "PostgresSampleExtractor",
]
