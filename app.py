"""Trip Rooming & Bus Seating Planner: Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_rooming_list,
    tab_bus_seats,
    tab_companion_roster,
    tab_data_admin,
)


def main():
    st.set_page_config(
        page_title="Rooming & Posti Bus",
        page_icon="🚌",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3, tab4 = st.tabs([
        "🏨 Lista Hotel",
        "🚌 Posti Bus",
        "🧭 Lista Accompagnatore",
        "⚙️ Dati",
    ])

    with tab1:
        tab_rooming_list.render(sidebar_state)
    with tab2:
        tab_bus_seats.render(sidebar_state)
    with tab3:
        tab_companion_roster.render(sidebar_state)
    with tab4:
        tab_data_admin.render(sidebar_state)


if __name__ == "__main__":
    main()
