"""KPI cards shown above the rooming list and the seat map."""

import streamlit as st


def render_metric_row(metrics: list[dict]):
    """One card per dict: label, value and an optional help tooltip."""
    for col, m in zip(st.columns(len(metrics)), metrics):
        col.metric(m["label"], m["value"], help=m.get("help"))


def render_unavailable(message: str):
    """Placeholder shown when a precondition (data, bus layout) is not met."""
    st.info(message, icon="ℹ️")
