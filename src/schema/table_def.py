from typing import List

from pydantic import BaseModel, Field

from .column_def import ColumnDef
from .foreign_key_def import ForeignKeyDef


class TableDef(BaseModel):
    """Canonical representation of one inspected table.

    Columns keep catalog ordinal order. ``sample_rows`` holds one JSON text
    blob per row and is empty when sampling was skipped or failed.
    """

    name: str
    columns: List[ColumnDef] = Field(default_factory=list)
    primary_keys: List[str] = Field(default_factory=list)
    foreign_keys: List[ForeignKeyDef] = Field(default_factory=list)
    sample_rows: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}
