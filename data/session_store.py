"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import List, Optional
from models.person import Person
from models.trip import Trip
from models.bus import BusLayout, SeatAssignment
from engine.seat_map import split_by_layout
from config.defaults import DEFAULT_CATEGORY_ORDER, PARSE_LEGACY_NOTES
from config.logging_config import get_logger

logger = get_logger(__name__)


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "participants": [],
        "trip": None,
        "bus_layout": None,
        "seat_assignments": [],
        "selected_seat": None,
        "released_seats": [],
        "data_loaded": False,
        "rule_config": {
            "category_order": DEFAULT_CATEGORY_ORDER,
            "parse_legacy_notes": PARSE_LEGACY_NOTES,
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_participants() -> List[Person]:
    return st.session_state.get("participants", [])


def get_trip() -> Optional[Trip]:
    return st.session_state.get("trip")


def get_bus_layout() -> Optional[BusLayout]:
    return st.session_state.get("bus_layout")


def get_seat_assignments() -> List[SeatAssignment]:
    return st.session_state.get("seat_assignments", [])


def get_selected_seat() -> Optional[int]:
    return st.session_state.get("selected_seat")


def pop_released_seats() -> List[SeatAssignment]:
    """Seats released by the last layout change, cleared once read."""
    released = st.session_state.get("released_seats", [])
    st.session_state["released_seats"] = []
    return released


def get_rule_config() -> dict:
    return st.session_state.get("rule_config", {})


def is_data_loaded() -> bool:
    return st.session_state.get("data_loaded", False)


# --- Setters ---

def set_participants(participants: List[Person]):
    st.session_state["participants"] = participants


def set_trip(trip: Optional[Trip]):
    st.session_state["trip"] = trip


def set_bus_layout(layout: Optional[BusLayout]) -> List[SeatAssignment]:
    """Store the layout and release seats that no longer exist in it.

    Returns the released assignments; they are also kept for the bus tab to report.
    """
    st.session_state["bus_layout"] = layout
    st.session_state["selected_seat"] = None
    released = []
    if layout is not None:
        kept, released = split_by_layout(get_seat_assignments(), layout)
        if released:
            st.session_state["seat_assignments"] = kept
            logger.warning("Layout change released %d seats outside %d-seat bus", len(released), layout.total_seats)
    st.session_state["released_seats"] = released
    return released


def set_seat_assignments(assignments: List[SeatAssignment]):
    st.session_state["seat_assignments"] = assignments


def set_selected_seat(seat: Optional[int]):
    st.session_state["selected_seat"] = seat


def set_data_loaded(loaded: bool):
    st.session_state["data_loaded"] = loaded


def set_rule_config(config: dict):
    st.session_state["rule_config"] = config


def reset_trip_data():
    """Clear everything loaded for the current trip, keeping the rule config."""
    set_participants([])
    set_trip(None)
    set_bus_layout(None)
    set_seat_assignments([])
    set_data_loaded(False)
