"""Rendering helpers for query answers.

Responsibilities:
    - Plotly figures for bar, line and pie visualization specs
    - Table extraction for table visualizations
    - CSV export of raw query results

Pure functions only; the NiceGUI page decides where things are drawn.
"""

from src.visualization.charts import (
    build_figure,
    chart_color,
    random_color,
    visualization_table,
)
from src.visualization.export import (
    CSV_FILENAME,
    CSV_MEDIA_TYPE,
    grid_columns,
    table_to_csv,
)

__all__ = [
    "CSV_FILENAME",
    "CSV_MEDIA_TYPE",
    "build_figure",
    "chart_color",
    "grid_columns",
    "random_color",
    "table_to_csv",
    "visualization_table",
]
