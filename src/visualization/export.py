"""Result-table helpers: NiceGUI column definitions and CSV export."""

from typing import Any

from src.models.schemas import TableResult

CSV_FILENAME = "query_results.csv"
CSV_MEDIA_TYPE = "text/csv"


def _quote(value: Any) -> str:
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '""') + '"'


def table_to_csv(table: TableResult) -> str:
    """Serialize a result table to CSV text.

    The header row is the column names joined by commas. Every data cell is
    double-quoted, in column order. Lines are joined with ``\\n``.

    Args:
        table: Result table to export.

    Returns:
        CSV document as a string.
    """
    header = ",".join(table.columns)
    rows = "\n".join(
        ",".join(_quote(row.get(col)) for col in table.columns) for row in table.rows
    )
    return f"{header}\n{rows}"


def grid_columns(columns: list[str]) -> list[dict[str, str]]:
    """Column definitions for ``ui.table``."""
    return [
        {"name": col, "label": col, "field": col, "align": "left"}
        for col in columns
    ]
