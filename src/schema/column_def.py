from pydantic import BaseModel


class ColumnDef(BaseModel):
    """Canonical representation of a table column as reported by the catalog."""

    name: str
    data_type: str
    udt_name: str = ""
    is_nullable: bool = True

    model_config = {"frozen": True}
