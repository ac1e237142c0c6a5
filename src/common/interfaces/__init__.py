"""Seams between the inspector and the data-access layer."""

from .catalog_client import CatalogClient
from .sample_extractor import SampleExtractor

__all__ = [
    "CatalogClient",
    "SampleExtractor",
]
