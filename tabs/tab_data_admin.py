"""Tab 4: Dati: data upload, validation, bus configuration and rule settings."""

import streamlit as st
import pandas as pd
from typing import Optional

from data.loader import (
    load_file, load_multi_sheet_excel, parse_participants, parse_trip,
    parse_bus_layout, parse_seat_assignments,
)
from data.validator import (
    validate_participants, validate_trip, validate_bus_layout, validate_seat_assignments,
)
from data.sample_data import (
    generate_participants_df, generate_trip_df, generate_bus_df, generate_seats_df,
)
from engine.seat_map import split_by_layout
from components.tables import render_styled_table
from data.session_store import (
    set_participants, set_trip, set_bus_layout, set_seat_assignments, set_data_loaded,
    get_participants, get_bus_layout, get_seat_assignments, get_rule_config, set_rule_config,
    is_data_loaded, reset_trip_data,
)
from models.bus import BusLayout
from config.defaults import (
    DEFAULT_BUS_ROWS, DEFAULT_SEATS_PER_ROW, DEFAULT_LAST_ROW_SEATS,
    MIN_BUS_ROWS, MIN_SEATS_PER_ROW, MAX_SEATS_PER_ROW,
    MIN_LAST_ROW_SEATS, MAX_LAST_ROW_SEATS,
)
from config.logging_config import get_logger

logger = get_logger(__name__)


def _load_and_validate(
    participants_df: pd.DataFrame,
    trip_df: Optional[pd.DataFrame] = None,
    bus_df: Optional[pd.DataFrame] = None,
    seats_df: Optional[pd.DataFrame] = None,
) -> bool:
    """Validate and store uploaded data."""
    errors = []
    warnings = []

    p_result = validate_participants(participants_df)
    errors.extend(p_result.errors)
    warnings.extend(p_result.warnings)

    if trip_df is not None:
        t_result = validate_trip(trip_df)
        errors.extend(t_result.errors)
        warnings.extend(t_result.warnings)

    layout = None
    if bus_df is not None and not bus_df.empty and "Rows" in bus_df.columns:
        layout = parse_bus_layout(bus_df)
        b_result = validate_bus_layout(layout)
        errors.extend(b_result.errors)
        warnings.extend(b_result.warnings)

    if seats_df is not None and p_result.is_valid:
        ids = participants_df["ID"].astype(str).str.strip().tolist()
        s_result = validate_seat_assignments(seats_df, layout, ids)
        errors.extend(s_result.errors)
        warnings.extend(s_result.warnings)

    if errors:
        for e in errors:
            st.error(e)
        logger.warning("Upload rejected with %d errors", len(errors))
        return False

    for w in warnings:
        st.warning(w)

    # Parse and store
    participants = parse_participants(participants_df, get_rule_config())
    known_ids = {p.person_id for p in participants}
    assignments = []
    if seats_df is not None:
        assignments = [a for a in parse_seat_assignments(seats_df, participants) if a.person_id in known_ids]

    set_participants(participants)
    set_trip(parse_trip(trip_df) if trip_df is not None else None)
    set_seat_assignments(assignments)
    set_bus_layout(layout)
    set_data_loaded(True)

    st.success(
        f"Dati caricati: {len(participants)} partecipanti, "
        f"{len({p.group_number for p in participants if p.group_number is not None})} gruppi, "
        f"{len(assignments)} posti bus assegnati"
    )
    return True


def _render_upload():
    st.subheader("Caricamento dati")

    upload_mode = st.radio(
        "Modalità",
        ["Un file Excel (più schede)", "File separati"],
        horizontal=True,
        key="upload_mode",
    )

    if upload_mode == "Un file Excel (più schede)":
        st.caption(
            "Carica un `.xlsx` con la scheda **Participants** (o *Partecipanti*) e, "
            "facoltative, **Trip**, **Bus**, **Seats**."
        )
        single_file = st.file_uploader("Workbook Excel", type=["xlsx"], key="upload_single")

        col_upload, col_sample = st.columns(2)
        with col_upload:
            if st.button("Carica e valida", type="primary", key="btn_upload_single"):
                if single_file:
                    try:
                        frames = load_multi_sheet_excel(single_file)
                        _load_and_validate(frames["participants"], frames["trip"], frames["bus"], frames["seats"])
                    except (ValueError, KeyError) as e:
                        st.error(f"Errore nel caricamento del file: {e}")
                else:
                    st.warning("Carica un file Excel.")
        with col_sample:
            if st.button("Dati di esempio", key="btn_sample_single"):
                _load_sample()
    else:
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            participants_file = st.file_uploader("Partecipanti", type=["csv", "xlsx"], key="upload_participants")
        with col2:
            trip_file = st.file_uploader("Viaggio (opz.)", type=["csv", "xlsx"], key="upload_trip")
        with col3:
            bus_file = st.file_uploader("Bus (opz.)", type=["csv", "xlsx"], key="upload_bus")
        with col4:
            seats_file = st.file_uploader("Posti (opz.)", type=["csv", "xlsx"], key="upload_seats")

        col_upload, col_sample = st.columns(2)
        with col_upload:
            if st.button("Carica e valida", type="primary", key="btn_upload_multi"):
                if participants_file:
                    try:
                        _load_and_validate(
                            load_file(participants_file),
                            load_file(trip_file) if trip_file else None,
                            load_file(bus_file) if bus_file else None,
                            load_file(seats_file) if seats_file else None,
                        )
                    except (ValueError, KeyError) as e:
                        st.error(f"Errore nel caricamento dei file: {e}")
                else:
                    st.warning("Il file dei partecipanti è obbligatorio.")
        with col_sample:
            if st.button("Dati di esempio", key="btn_sample_multi"):
                _load_sample()


def _load_sample():
    participants_df = generate_participants_df()
    _load_and_validate(
        participants_df,
        generate_trip_df(),
        generate_bus_df(),
        generate_seats_df(participants_df),
    )


def _render_bus_config():
    st.subheader("Configurazione bus")
    layout = get_bus_layout()

    col1, col2, col3 = st.columns(3)
    rows = col1.number_input(
        "File", min_value=MIN_BUS_ROWS, max_value=40,
        value=layout.rows if layout else DEFAULT_BUS_ROWS, key="bus_rows",
    )
    seats_per_row = col2.number_input(
        "Posti per fila", min_value=MIN_SEATS_PER_ROW, max_value=MAX_SEATS_PER_ROW,
        value=layout.seats_per_row if layout else DEFAULT_SEATS_PER_ROW, key="bus_spr",
    )
    last_row = col3.number_input(
        "Posti ultima fila", min_value=MIN_LAST_ROW_SEATS, max_value=MAX_LAST_ROW_SEATS,
        value=(layout.last_row_seats or DEFAULT_LAST_ROW_SEATS) if layout else DEFAULT_LAST_ROW_SEATS,
        key="bus_last_row",
    )
    has_wc = st.checkbox("WC a bordo", value=layout.has_wc if layout else False, key="bus_wc")

    candidate = BusLayout(
        rows=int(rows), seats_per_row=int(seats_per_row),
        last_row_seats=int(last_row), has_wc=has_wc, name="Personalizzato",
    )
    st.caption(f"Totale: {candidate.total_seats} posti passeggeri")
    _, outside = split_by_layout(get_seat_assignments(), candidate)
    if outside:
        st.warning(
            f"{len(outside)} posti assegnati non esistono nel nuovo layout e verranno liberati: "
            + ", ".join(f"{a.seat_number} ({a.person_name or a.person_id})" for a in outside)
        )

    if st.button("Salva configurazione bus", key="btn_save_bus"):
        result = validate_bus_layout(candidate)
        if not result.is_valid:
            for e in result.errors:
                st.error(e)
            return
        set_bus_layout(candidate)
        logger.info("Bus layout saved: %d rows, %d seats", candidate.rows, candidate.total_seats)
        st.success("Configurazione bus salvata.")
        st.rerun()


def _render_rule_config():
    st.subheader("Regole")
    cfg = dict(get_rule_config())
    parse_notes = st.checkbox(
        "Leggi la tipologia camera dalle note ('Camera: doppia') se manca la colonna Room Type",
        value=cfg.get("parse_legacy_notes", True),
        key="cfg_parse_notes",
    )
    if parse_notes != cfg.get("parse_legacy_notes", True):
        cfg["parse_legacy_notes"] = parse_notes
        set_rule_config(cfg)
        st.info("Ricarica i dati per applicare la modifica.")


def render(sidebar_state):
    """Render the data administration tab."""
    st.header("Dati")

    _render_upload()
    st.divider()

    if is_data_loaded():
        _render_bus_config()
        st.divider()

        render_styled_table(pd.DataFrame([{
            "ID": p.person_id,
            "Nominativo": p.full_name,
            "Gruppo": str(p.group_number) if p.group_number is not None else "-",
            "Camera": p.category,
        } for p in get_participants()]), title="Partecipanti caricati")

        if st.button("Svuota dati viaggio", key="btn_reset"):
            reset_trip_data()
            st.rerun()
        st.divider()

    _render_rule_config()
