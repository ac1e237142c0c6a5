from typing import List

from pydantic import BaseModel, Field

from .table_def import TableDef


class SchemaSnapshot(BaseModel):
    """Ordered result of one inspection pass over a single schema."""

    schema_name: str = "public"
    tables: List[TableDef] = Field(default_factory=list)

    model_config = {"frozen": True}
