"""Plotly figures for server-provided visualization specs."""

import logging
import random
from collections.abc import Callable
from typing import Any

import plotly.graph_objects as go

from src.models.schemas import TableResult, Visualization

logger = logging.getLogger(__name__)

CHART_HEIGHT = 240


def random_color() -> str:
    """Return a random ``#rrggbb`` color."""
    return f"#{random.randint(0, 0xFFFFFF):06x}"


def chart_color(color: str | None) -> str:
    """Return ``color`` if plotly accepts it, otherwise a random color."""
    if color:
        try:
            go.bar.Marker(color=color)
            return color
        except ValueError:
            logger.warning(f"Unsupported chart color {color!r}, using a random one")
    return random_color()


def _column(records: list[dict[str, Any]], key: str | None) -> list[Any]:
    return [record.get(key) for record in records] if key else []


def _layout(fig: go.Figure, viz: Visualization) -> go.Figure:
    fig.update_layout(
        title=viz.title or None,
        height=CHART_HEIGHT,
        margin={"t": 40 if viz.title else 10, "r": 30, "l": 20, "b": 5},
        template="plotly_white",
        showlegend=True,
    )
    return fig


def _bar_figure(viz: Visualization) -> go.Figure:
    x = _column(viz.data, viz.x_axis)
    fig = go.Figure()
    for s in viz.series:
        fig.add_trace(
            go.Bar(
                x=x,
                y=_column(viz.data, s.data_key),
                name=s.name or s.data_key,
                marker_color=chart_color(s.color),
            )
        )
    fig.update_layout(barmode="group")
    return _layout(fig, viz)


def _line_figure(viz: Visualization) -> go.Figure:
    x = _column(viz.data, viz.x_axis)
    fig = go.Figure()
    for s in viz.series:
        fig.add_trace(
            go.Scatter(
                x=x,
                y=_column(viz.data, s.data_key),
                name=s.name or s.data_key,
                mode="lines+markers",
                line={"color": chart_color(s.color), "shape": "spline"},
            )
        )
    return _layout(fig, viz)


def _pie_figure(viz: Visualization) -> go.Figure:
    colors = viz.colors or []
    slice_colors = [
        chart_color(colors[i] if i < len(colors) else None)
        for i in range(len(viz.data))
    ]
    fig = go.Figure(
        go.Pie(
            labels=_column(viz.data, viz.name_key),
            values=_column(viz.data, viz.value_key),
            marker={"colors": slice_colors},
            texttemplate="%{label}: %{percent:.0%}",
            sort=False,
        )
    )
    return _layout(fig, viz)


_FIGURE_BUILDERS: dict[str, Callable[[Visualization], go.Figure]] = {
    "bar": _bar_figure,
    "line": _line_figure,
    "pie": _pie_figure,
}


def build_figure(viz: Visualization) -> go.Figure | None:
    """Build the plotly figure for a chart visualization.

    Args:
        viz: Visualization spec from the API.

    Returns:
        Figure for bar, line and pie charts; None for tables and unknown types.
    """
    builder = _FIGURE_BUILDERS.get(viz.type)
    if builder is None:
        if viz.type != "table":
            logger.debug(f"No renderer for visualization type {viz.type!r}")
        return None
    return builder(viz)


def visualization_table(viz: Visualization) -> TableResult | None:
    """Turn a ``table`` visualization into a TableResult.

    Columns are the keys of the first record. Returns None for other types
    and for empty data.
    """
    if viz.type != "table" or not viz.data:
        return None
    return TableResult(columns=list(viz.data[0].keys()), rows=viz.data)
