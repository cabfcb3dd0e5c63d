"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import Optional


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width, hide_index=True)


def render_rooming_table(df: pd.DataFrame, room_column: str = "Camera"):
    """Render the rooming list, shading alternate rooms so merged rows read as one."""
    shades = []
    shade = False
    for value in df[room_column] if room_column in df.columns else []:
        if value != "":
            shade = not shade
        shades.append(shade)

    def shade_rows(row):
        style = "background-color: #F1F5F9" if shades[row.name] else ""
        return [style] * len(row)

    if shades:
        styled = df.style.apply(shade_rows, axis=1)
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)


def render_roster_table(df: pd.DataFrame, seat_column: str = "Posto Bus"):
    """Render the companion roster, flagging participants without a bus seat."""
    def color_seat(val):
        if val == "-":
            return "color: #cc0000; font-weight: bold"
        return "font-weight: bold"

    if seat_column in df.columns:
        styled = df.style.map(color_seat, subset=[seat_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
