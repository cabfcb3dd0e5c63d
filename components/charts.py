"""Plotly chart builders for rooming and bus seating views."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List

from config.defaults import SEAT_STATE_COLORS, SEAT_STATE_LABELS


def rooms_by_category_bar(summary: List[dict], title: str = "Camere per tipologia") -> go.Figure:
    """Grouped bar of rooms and people per room category."""
    df = pd.DataFrame(summary)
    fig = px.bar(
        df, x="label", y=["rooms", "people"],
        barmode="group",
        labels={"value": "Totale", "label": "Tipologia", "variable": ""},
        title=title,
        color_discrete_map={"rooms": "#4A90D9", "people": "#E8734A"},
    )
    fig.update_layout(legend_title_text="", height=350)
    return fig


def occupancy_donut(occupied: int, total: int, title: str = "Occupazione bus") -> go.Figure:
    """Donut chart showing bus seat occupancy."""
    free = total - occupied
    fig = go.Figure(data=[go.Pie(
        labels=[SEAT_STATE_LABELS["occupied"], SEAT_STATE_LABELS["free"]],
        values=[occupied, free],
        hole=0.6,
        marker_colors=[SEAT_STATE_COLORS["occupied"], SEAT_STATE_COLORS["free"]],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=320,
        showlegend=True,
        annotations=[dict(text=f"{occupied}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def seat_map_figure(grid: List[List[dict]], seats_per_row: int) -> go.Figure:
    """Top-down bus plan: driver at the top, aisle between the two seat halves."""
    xs, ys, colors, texts, hovers = [], [], [], [], []
    aisle_after = seats_per_row // 2

    for row in grid:
        for seat in row:
            col = seat["column"]
            # the aisle only exists in rows no wider than a normal row
            x = col + 0.6 if col > aisle_after and len(row) <= seats_per_row else col
            xs.append(x)
            ys.append(-seat["row"])
            colors.append(SEAT_STATE_COLORS[seat["state"]])
            texts.append(str(seat["seat_number"]))
            holder = seat["participant_name"] or SEAT_STATE_LABELS[seat["state"]]
            hovers.append(f"Posto {seat['seat_number']}<br>{holder}")

    fig = go.Figure(data=go.Scatter(
        x=xs, y=ys,
        mode="markers+text",
        marker=dict(symbol="square", size=30, color=colors, line=dict(width=1, color="#333")),
        text=texts,
        textfont=dict(color="white", size=11),
        hovertext=hovers,
        hoverinfo="text",
    ))
    fig.add_annotation(x=1, y=0, text="AUTISTA", showarrow=False, font=dict(size=10))
    fig.update_layout(
        height=max(400, len(grid) * 42 + 80),
        width=320,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, scaleanchor="x"),
        margin=dict(l=10, r=10, t=30, b=10),
        plot_bgcolor="#F8FAFC",
    )
    return fig
