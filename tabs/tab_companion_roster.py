"""Tab 3: Lista Accompagnatore: roster grouped by travel group with bus seats."""

import streamlit as st
import pandas as pd

from data.session_store import get_participants, get_seat_assignments, get_trip, is_data_loaded
from engine.roster import build_companion_roster
from engine.room_allocator import format_surname_first
from components.metrics_cards import render_unavailable
from components.tables import render_roster_table


def render(sidebar_state):
    """Render the companion roster tab."""
    st.header("Lista Accompagnatore")

    if not is_data_loaded():
        render_unavailable("Nessun dato caricato. Carica i partecipanti nella scheda Dati.")
        return

    trip = get_trip()
    if trip and trip.companion_name:
        st.caption(f"Accompagnatore: {trip.companion_name}")

    roster = build_companion_roster(get_participants(), get_seat_assignments())
    if not roster:
        render_unavailable("Nessun partecipante per questo viaggio.")
        return

    df = pd.DataFrame([{
        "Gr.": (r["group"] if r["group"] is not None else "-") if r["group_rowspan"] else "",
        "Nominativo": format_surname_first(r["full_name"]),
        "Posto Bus": r["seat_number"] if r["seat_number"] is not None else "-",
        "Telefono": r["phone"],
        "Camera": r["room"],
    } for r in roster])
    render_roster_table(df)

    st.download_button(
        "Scarica CSV",
        data=df.to_csv(index=False).encode("utf-8"),
        file_name="lista_accompagnatore.csv",
        mime="text/csv",
        key="dl_roster_csv",
    )
