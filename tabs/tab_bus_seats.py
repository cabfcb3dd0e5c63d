"""Tab 2: Posti Bus: interactive seat map and seat assignment."""

import streamlit as st
import pandas as pd

from data.session_store import (
    get_participants, get_bus_layout, get_seat_assignments, set_seat_assignments,
    get_selected_seat, set_selected_seat, pop_released_seats, is_data_loaded,
)
from engine.seat_map import (
    build_seat_grid, occupancy_summary, unassigned_participants, assign_seat, release_seat,
)
from components.charts import seat_map_figure, occupancy_donut
from components.metrics_cards import render_metric_row, render_unavailable
from components.tables import render_styled_table
from config.defaults import SEAT_OCCUPIED, SEAT_STATE_LABELS
from config.logging_config import get_logger

logger = get_logger(__name__)


def _render_assignment_panel(layout, grid, participants, assignments):
    st.subheader("Assegna posto")

    waiting = unassigned_participants(participants, assignments, layout)
    st.caption(f"Partecipanti senza posto: {len(waiting)}")

    waiting_ids = {p.person_id for p in waiting}
    by_id = {p.person_id: p for p in participants}
    options = [p.person_id for p in waiting] + [p.person_id for p in participants if p.person_id not in waiting_ids]
    if not options:
        st.info("Nessun partecipante.")
        return

    person_id = st.selectbox(
        "Partecipante",
        options=options,
        format_func=lambda pid: by_id[pid].full_name + ("" if pid in waiting_ids else " (già seduto)"),
        key="seat_person",
    )
    person = by_id[person_id]

    selectable = [s["seat_number"] for row in grid for s in row if s["state"] != SEAT_OCCUPIED]
    if not selectable:
        st.warning("Bus completo.")
        return

    current = get_selected_seat()
    seat = st.selectbox(
        "Posto",
        options=selectable,
        index=selectable.index(current) if current in selectable else 0,
        key="seat_choice",
    )
    if seat != current:
        set_selected_seat(seat)
        st.rerun()

    if st.button(f"Conferma posto {seat}", type="primary", key="btn_assign_seat"):
        try:
            updated = assign_seat(assignments, layout, seat, person)
        except ValueError as e:
            st.error(str(e))
            return
        set_seat_assignments(updated)
        set_selected_seat(None)
        logger.info("Seat %d assigned to %s", seat, person.full_name)
        st.success(f"Posto {seat} assegnato a {person.full_name}")
        st.rerun()


def _render_release_panel(assignments):
    st.subheader("Libera posto")
    if not assignments:
        st.caption("Nessun posto assegnato.")
        return

    holders = {a.seat_number: a.person_name or a.person_id for a in assignments}
    held = st.selectbox(
        "Posto occupato",
        options=list(holders),
        format_func=lambda s: f"{s} - {holders[s]}",
        key="seat_release",
    )
    if st.button("Libera", key="btn_release_seat"):
        set_seat_assignments(release_seat(assignments, held))
        logger.info("Seat %d released", held)
        st.rerun()


def render(sidebar_state):
    """Render the bus seat tab."""
    st.header("Posti Bus")

    if not is_data_loaded():
        render_unavailable("Nessun dato caricato. Carica i partecipanti nella scheda Dati.")
        return

    layout = get_bus_layout()
    if layout is None:
        render_unavailable("Configurazione bus non disponibile. Scegli un modello bus nella barra laterale.")
        return

    released = pop_released_seats()
    if released:
        st.warning(
            "Posti liberati dal cambio bus: "
            + ", ".join(f"{a.seat_number} ({a.person_name or a.person_id})" for a in released)
        )

    participants = get_participants()
    assignments = get_seat_assignments()
    grid = build_seat_grid(layout, assignments, get_selected_seat())
    summary = occupancy_summary(layout, assignments)

    render_metric_row([
        {"label": "Posti totali", "value": summary["total_seats"]},
        {"label": "Occupati", "value": summary["occupied_seats"]},
        {"label": "Liberi", "value": summary["free_seats"]},
        {"label": "Occupazione", "value": f"{summary['occupancy_pct']:.0%}"},
    ])

    col_map, col_side = st.columns([2, 3])
    with col_map:
        legend = " · ".join(SEAT_STATE_LABELS.values())
        st.caption(legend)
        st.plotly_chart(seat_map_figure(grid, layout.seats_per_row), use_container_width=False)
    with col_side:
        st.plotly_chart(
            occupancy_donut(summary["occupied_seats"], summary["total_seats"]),
            use_container_width=True,
        )
        _render_assignment_panel(layout, grid, participants, assignments)
        st.divider()
        _render_release_panel(assignments)

    st.divider()
    st.subheader("Assegnazioni")
    if assignments:
        render_styled_table(pd.DataFrame([{
            "Posto": a.seat_number,
            "Partecipante": a.person_name or a.person_id,
        } for a in assignments]))
    else:
        st.caption("Nessun posto assegnato.")
