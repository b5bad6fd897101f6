"""Map result records onto a chart shape.

``build_chart_spec`` is pure and library agnostic; ``to_figure`` turns the
spec into a Plotly figure for the UI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import plotly.graph_objects as go

from .table import is_number, columns_of

LIGHT_COLORS = ["#3B82F6", "#8B5CF6", "#10B981", "#F59E0B", "#EF4444", "#14B8A6", "#F97316"]
DARK_COLORS = ["#60A5FA", "#8B5CF6", "#34D399", "#FBBF24", "#F87171", "#2DD4BF", "#FB923C"]
TIME_HINTS = ("date", "time", "year", "month")
MAX_CATEGORIES = 20


@dataclass
class ChartSpec:
    kind: str  # bar | line | pie | scatter
    x: List[Any]
    y: List[Any]
    x_title: str = ""
    y_title: str = ""
    colors: List[str] = field(default_factory=list)
    template: str = "plotly_white"
    fallback: bool = False


def time_column(columns: Sequence[str]) -> Optional[str]:
    return next((c for c in columns if any(h in c.lower() for h in TIME_HINTS)), None)


def numeric_columns(records: Sequence[Dict[str, Any]]) -> List[str]:
    if not records:
        return []
    return [c for c in columns_of(records) if is_number(records[0][c])]


def category_column(records: Sequence[Dict[str, Any]]) -> Optional[str]:
    columns = columns_of(records)
    skip = set(numeric_columns(records)) | {time_column(columns)}
    for c in columns:
        if c in skip:
            continue
        distinct = {str(r.get(c)) for r in records}
        if 1 < len(distinct) <= MAX_CATEGORIES:
            return c
    return None


def build_chart_spec(records: Sequence[Dict[str, Any]], chart_type: Optional[str], dark_mode: bool = False) -> Optional[ChartSpec]:
    if not records:
        return None

    columns = columns_of(records)
    numeric = numeric_columns(records)
    category = category_column(records)
    timecol = time_column(columns)
    value_col = numeric[0] if numeric else columns[0]
    colors = DARK_COLORS if dark_mode else LIGHT_COLORS
    template = "plotly_dark" if dark_mode else "plotly_white"

    def column(name):
        return [r.get(name) for r in records]

    if chart_type in ("bar", "pie") and numeric:
        label_col = category or columns[0]
        return ChartSpec(chart_type, column(label_col), column(value_col), label_col, value_col, colors, template)
    if chart_type == "line" and numeric:
        label_col = timecol or columns[0]
        return ChartSpec("line", column(label_col), column(value_col), label_col, value_col, colors, template)
    if chart_type == "scatter" and len(numeric) >= 2:
        x_col, y_col = numeric[0], numeric[1]
        return ChartSpec("scatter", column(x_col), column(y_col), x_col, y_col, colors, template)

    # Best-effort bar for unknown kinds or records missing the needed columns
    labels = column(category) if category else [f"Item {i + 1}" for i in range(len(records))]
    values = column(numeric[0]) if numeric else [1] * len(records)
    return ChartSpec(
        "bar", labels, values,
        category or "", numeric[0] if numeric else "Count",
        colors, template, fallback=True,
    )


def to_figure(spec: ChartSpec) -> go.Figure:
    if spec.kind == "pie":
        trace = go.Pie(labels=spec.x, values=spec.y, marker=dict(colors=spec.colors))
    elif spec.kind == "line":
        trace = go.Scatter(x=spec.x, y=spec.y, mode="lines+markers", fill="tozeroy",
                           line=dict(color=spec.colors[0], shape="spline"), name=spec.y_title)
    elif spec.kind == "scatter":
        trace = go.Scatter(x=spec.x, y=spec.y, mode="markers", marker=dict(color=spec.colors[0]),
                           name=f"{spec.x_title} vs {spec.y_title}")
    else:
        trace = go.Bar(x=spec.x, y=spec.y, marker_color=spec.colors[0], name=spec.y_title)

    fig = go.Figure(trace)
    fig.update_layout(template=spec.template, height=350, margin=dict(l=20, r=20, t=30, b=20))
    if spec.kind != "pie":
        fig.update_xaxes(title_text=spec.x_title)
        fig.update_yaxes(title_text=spec.y_title)
    return fig
