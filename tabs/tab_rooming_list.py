"""Tab 1: Lista Hotel: rooms per travel group, printable rooming list."""

import streamlit as st

from data.session_store import get_participants, get_trip, get_rule_config, is_data_loaded
from engine.room_allocator import allocate
from engine.rooming_list import (
    build_rooming_rows, rooming_summary, rooming_list_dataframe, rooming_list_html,
    rooming_sections, rooming_sections_html,
)
from engine.explainer import explain_allocation
from components.charts import rooms_by_category_bar
from components.metrics_cards import render_metric_row, render_unavailable
from components.tables import render_rooming_table


def render(sidebar_state):
    """Render the rooming list tab."""
    st.header("Lista Hotel")

    if not is_data_loaded():
        render_unavailable("Nessun dato caricato. Carica i partecipanti nella scheda Dati.")
        return

    participants = get_participants()
    if not participants:
        render_unavailable("Nessun partecipante per questo viaggio.")
        return

    result = allocate(participants, sidebar_state.rule_config(get_rule_config()))
    rows = build_rooming_rows(result)
    summary = rooming_summary(result)

    render_metric_row([
        {"label": "Partecipanti", "value": result.person_count},
        {"label": "Camere", "value": result.unit_count},
        {"label": "Gruppi", "value": len(result.groups)},
        {"label": "Senza gruppo", "value": len(result.ungrouped),
         "help": "Partecipanti senza gruppo: una camera ciascuno"},
    ])

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(rooms_by_category_bar(summary), use_container_width=True)
    with col2:
        for entry in summary:
            partial = f", {entry['partial_rooms']} non complete" if entry["partial_rooms"] else ""
            st.markdown(f"**{entry['label']}**: {entry['rooms']} ({entry['people']} persone{partial})")

    st.divider()

    df = rooming_list_dataframe(rows)
    render_rooming_table(df)

    col_html, col_sections, col_csv = st.columns(3)
    with col_html:
        st.download_button(
            "Scarica lista stampabile (HTML)",
            data=rooming_list_html(get_trip(), rows),
            file_name="lista_hotel.html",
            mime="text/html",
            key="dl_rooming_html",
        )
    with col_sections:
        st.download_button(
            "Scarica lista per tipologia (HTML)",
            data=rooming_sections_html(get_trip(), rooming_sections(result)),
            file_name="lista_hotel_tipologie.html",
            mime="text/html",
            key="dl_rooming_sections_html",
        )
    with col_csv:
        st.download_button(
            "Scarica CSV",
            data=df.to_csv(index=False).encode("utf-8"),
            file_name="lista_hotel.csv",
            mime="text/csv",
            key="dl_rooming_csv",
        )

    with st.expander("Come sono state formate le camere"):
        for step in explain_allocation(result):
            st.markdown(f"- {step}")
