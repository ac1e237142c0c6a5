from pydantic import BaseModel


class ForeignKeyDef(BaseModel):
    """A single column-level reference from one table to another.

    Multi-column constraints are not grouped: each referencing column is its
    own edge, mirroring the one-row-per-column shape of the catalog.
    """

    column_name: str
    foreign_table_name: str
    foreign_column_name: str

    model_config = {"frozen": True}
