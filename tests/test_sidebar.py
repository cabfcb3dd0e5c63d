"""Tests for the sidebar controls and the bus layout they store."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from streamlit.testing.v1 import AppTest

from models.person import Person
from models.bus import BusLayout, SeatAssignment
from engine.room_allocator import allocate
from components.sidebar import SidebarState


def _sidebar_app():
    from data.session_store import initialize_session_state
    from components.sidebar import render_sidebar

    initialize_session_state()
    render_sidebar()


def make_app():
    at = AppTest.from_function(_sidebar_app, default_timeout=10)
    at.run()
    return at


def pick_preset(at, label):
    at.selectbox(key="sidebar_bus_preset").set_value(label).run()


class TestSidebarState:
    def test_rule_config_overrides_category_order(self):
        base = {"category_order": "first_seen", "parse_legacy_notes": False}
        cfg = SidebarState(category_order="canonical").rule_config(base)
        assert cfg == {"category_order": "canonical", "parse_legacy_notes": False}
        assert base["category_order"] == "first_seen"

    def test_rule_config_drives_allocation(self):
        people = [Person("1", "A A", 1, "tripla"), Person("2", "B B", 1, "singola")]
        cfg = SidebarState(category_order="canonical").rule_config({"category_order": "first_seen"})
        assert [u.category for u in allocate(people, cfg).groups[1]] == ["singola", "tripla"]


class TestBusPreset:
    def test_picking_a_preset_sets_the_layout(self):
        at = make_app()
        assert at.session_state["bus_layout"] is None

        pick_preset(at, "GT 49 posti")
        assert at.session_state["bus_layout"].name == "GT 49 posti"
        assert at.session_state["bus_layout"].total_seats == 49

    def test_custom_layout_is_not_overwritten(self):
        at = make_app()
        pick_preset(at, "GT 49 posti")

        at.session_state["bus_layout"] = BusLayout(rows=5, last_row_seats=3, name="Personalizzato")
        at.run()
        at.run()

        assert at.session_state["bus_layout"].name == "Personalizzato"
        assert at.selectbox(key="sidebar_bus_preset").value == "-"

    def test_widget_follows_layout_set_elsewhere(self):
        at = make_app()
        pick_preset(at, "GT 49 posti")

        at.session_state["bus_layout"] = BusLayout(rows=5, last_row_seats=3, name="Minibus 19 posti")
        at.run()
        assert at.selectbox(key="sidebar_bus_preset").value == "Minibus 19 posti"

    def test_smaller_preset_releases_seats_outside_it(self):
        at = make_app()
        pick_preset(at, "GT 49 posti")
        at.session_state["seat_assignments"] = [
            SeatAssignment(3, "P2", "Anna Verdi"),
            SeatAssignment(40, "P1", "Mario Rossi"),
        ]

        pick_preset(at, "Minibus 19 posti")

        assert [a.seat_number for a in at.session_state["seat_assignments"]] == [3]
        assert [a.person_id for a in at.session_state["released_seats"]] == ["P1"]


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
