"""Global sidebar controls for trip info, room ordering and bus preset."""

import streamlit as st
from dataclasses import dataclass
from data.session_store import (
    get_rule_config, set_rule_config, get_trip, get_bus_layout, set_bus_layout, is_data_loaded,
)
from engine.seat_map import layout_from_preset, preset_label
from config.defaults import CATEGORY_ORDER_MODES, BUS_PRESETS

CATEGORY_ORDER_LABELS = {
    "first_seen": "Ordine di inserimento",
    "canonical": "Singola → Quadrupla",
}


def _apply_bus_preset():
    label = st.session_state["sidebar_bus_preset"]
    layout = layout_from_preset(label)
    if layout is not None:
        set_bus_layout(layout)


@dataclass
class SidebarState:
    category_order: str

    def rule_config(self, base: dict) -> dict:
        """Stored rule config with the sidebar choices applied on top."""
        return {**base, "category_order": self.category_order}


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Rooming & Posti Bus")
        st.divider()

        trip = get_trip()
        if trip:
            st.subheader(trip.title)
            st.caption(trip.destination)
            if trip.companion_name:
                st.caption(f"Accompagnatore: {trip.companion_name}")

        if is_data_loaded():
            st.success("Dati caricati")
        else:
            st.warning("Nessun dato caricato: vai alla scheda Dati")

        st.divider()

        # Category order inside a travel group
        cfg = dict(get_rule_config())
        current = cfg.get("category_order", CATEGORY_ORDER_MODES[0])
        order = st.radio(
            "Ordine tipologie nel gruppo",
            options=CATEGORY_ORDER_MODES,
            format_func=lambda x: CATEGORY_ORDER_LABELS.get(x, x),
            index=CATEGORY_ORDER_MODES.index(current) if current in CATEGORY_ORDER_MODES else 0,
            key="sidebar_category_order",
        )
        if order != current:
            cfg["category_order"] = order
            set_rule_config(cfg)

        # Bus preset; the widget follows the stored layout and only writes on change
        labels = ["-"] + [p["label"] for p in BUS_PRESETS]
        current_label = preset_label(get_bus_layout()) or "-"
        if st.session_state.get("sidebar_bus_preset") != current_label:
            st.session_state["sidebar_bus_preset"] = current_label
        st.selectbox(
            "Modello bus",
            options=labels,
            key="sidebar_bus_preset",
            on_change=_apply_bus_preset,
        )

        layout = get_bus_layout()
        if layout:
            st.caption(f"{layout.total_seats} posti, {layout.rows} file")
            if layout.has_wc:
                st.caption("WC a bordo")

    return SidebarState(category_order=order)
