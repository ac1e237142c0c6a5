"""Generate a Markdown snapshot of a PostgreSQL schema."""

from schemadoc.inspector import SchemaInspector
from schemadoc.renderer import render_markdown
from schemadoc.report import generate_report

__version__ = "0.1.0"

__all__ = [
    "SchemaInspector",
    "generate_report",
    "render_markdown",
]
