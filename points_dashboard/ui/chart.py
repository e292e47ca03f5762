"""Line chart for the points series."""

import pandas as pd
import plotly.graph_objects as go

from points_dashboard.models import Observation


LINE_COLOR = "#e9eef5"
BACKGROUND = "#0b0f14"

# Seconds range representable by a nanosecond DatetimeIndex (years 1677-2262)
PLOTTABLE_MIN = pd.Timestamp.min.value // 10**9 + 1
PLOTTABLE_MAX = pd.Timestamp.max.value // 10**9


def to_frame(points: list[Observation]) -> pd.DataFrame:
    """DataFrame with DatetimeIndex and 'value' column. Points outside the index range are left out."""
    points = [p for p in points if PLOTTABLE_MIN <= p.time <= PLOTTABLE_MAX]
    if not points:
        return pd.DataFrame(columns=["value"], index=pd.DatetimeIndex([], name="time"))

    df = pd.DataFrame({
        "time": pd.to_datetime([p.time for p in points], unit="s"),
        "value": [p.value for p in points],
    })
    df.set_index("time", inplace=True)
    return df


def build_figure(points: list[Observation], height: int = 420) -> go.Figure:
    """Plain line chart, fitted to the given points. Empty input gives an empty chart."""
    df = to_frame(points)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df.index, y=df["value"],
        mode="lines", line=dict(color=LINE_COLOR, width=2),
        name="Punkte",
        hovertemplate="%{x|%d.%m.%Y %H:%M}<br>%{y:,.2f}<extra></extra>",
    ))

    fig.update_layout(
        height=height, margin=dict(l=0, r=40, t=10, b=0),
        paper_bgcolor=BACKGROUND, plot_bgcolor=BACKGROUND,
        font=dict(color=LINE_COLOR),
        showlegend=False,
        separators=",.",
        xaxis=dict(showgrid=False, tickformat="%d.%m.%y"),
        yaxis=dict(showgrid=False, side="right"),
        hovermode="x unified",
    )
    return fig
