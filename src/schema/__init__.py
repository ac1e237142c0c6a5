"""In-memory schema model produced by an inspection pass."""

from .column_def import ColumnDef
from .foreign_key_def import ForeignKeyDef
from .snapshot import SchemaSnapshot
from .table_def import TableDef

__all__ = [
    "ColumnDef",
    "ForeignKeyDef",
    "SchemaSnapshot",
    "TableDef",
]
