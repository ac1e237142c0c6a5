"""Markdown rendering of a schema snapshot.

Pure and stateless: the same snapshot always renders to the same text.
"""

from typing import List

from schema import SchemaSnapshot, TableDef

PRIMARY_KEY_SEPARATOR = ", "


def _nullable_flag(is_nullable: bool) -> str:
    return "YES" if is_nullable else "NO"


def render_table(table: TableDef) -> str:
    """Render one table section, including the trailing separator."""
    lines: List[str] = [
        f"## Table: {table.name}",
        "| Column | Type | Nullable |",
        "|---|---|---|",
    ]
    for col in table.columns:
        lines.append(f"| {col.name} | {col.data_type} | {_nullable_flag(col.is_nullable)} |")

    if table.primary_keys:
        lines.append("")
        lines.append(f"**Primary Key:** {PRIMARY_KEY_SEPARATOR.join(table.primary_keys)}")

    if table.foreign_keys:
        lines.append("")
        lines.append("**Foreign Keys:**")
        for fk in table.foreign_keys:
            lines.append(
                f"- `{table.name}.{fk.column_name}` -> "
                f"`{fk.foreign_table_name}.{fk.foreign_column_name}`"
            )

    if table.sample_rows:
        lines.append("")
        lines.append("**Sample Data (Top 5 rows):**")
        for row in table.sample_rows:
            lines.append(f"- `{row}`")

    lines.append("")
    lines.append("---")
    lines.append("")
    return "\n".join(lines) + "\n"


def render_markdown(db_name: str, snapshot: SchemaSnapshot) -> str:
    """Render the full report for a database."""
    parts = [f"Database Schema for: {db_name}\n\n"]
    parts.extend(render_table(table) for table in snapshot.tables)
    return "".join(parts)
