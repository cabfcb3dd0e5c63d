"""Tests for the rooming list, companion roster and allocation explainer."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import date, datetime

from models.person import Person
from models.trip import Trip
from models.bus import SeatAssignment
from engine.room_allocator import allocate
from engine.rooming_list import (
    build_rooming_rows,
    rooming_summary,
    rooming_list_dataframe,
    rooming_list_html,
    rooming_sections,
    rooming_sections_html,
)
from engine.roster import build_companion_roster
from engine.explainer import explain_allocation


def make_person(pid, name, group=1, category="doppia", dob=None, place=None):
    return Person(pid, name, group, category, dob, place)


def make_trip():
    return Trip("T1", "Tour & Puglia", "Lecce", date(2026, 6, 12), date(2026, 6, 16), "Rosa Ferri")


def sample_people():
    return [
        make_person("1", "Anna Rossi", 1, "doppia", date(1970, 3, 5), "Roma"),
        make_person("2", "Bruno Rossi", 1, "doppia"),
        make_person("3", "Carla Verdi", 1, "doppia"),
        make_person("4", "Dario Neri", 2, "tripla"),
        make_person("5", "Elisa Neri", 2, "tripla"),
        make_person("6", "Fabio Blu", None, "doppia"),
    ]


class TestRoomingRows:
    def test_rows_in_print_order(self):
        rows = build_rooming_rows(allocate(sample_people()))
        assert [r["person_id"] for r in rows] == ["1", "2", "3", "4", "5", "6"]
        assert [r["room_no"] for r in rows] == [1, 1, 2, 3, 3, 4]

    def test_merged_cells(self):
        rows = build_rooming_rows(allocate(sample_people()))
        assert [r["group_rowspan"] for r in rows] == [3, 0, 0, 2, 0, 1]
        assert [r["room_rowspan"] for r in rows] == [2, 0, 1, 2, 0, 1]
        assert rows[5]["group"] is None

    def test_formatted_fields(self):
        rows = build_rooming_rows(allocate(sample_people()))
        assert rows[0]["date_of_birth"] == "05/03/1970"
        assert rows[0]["place_of_birth"] == "Roma"
        assert rows[1]["date_of_birth"] == "-"
        assert rows[1]["place_of_birth"] == "-"
        assert rows[3]["category_label"] == "Camera Tripla"

    def test_empty(self):
        assert build_rooming_rows(allocate([])) == []


class TestRoomingSummary:
    def test_counts_per_category(self):
        summary = rooming_summary(allocate(sample_people()))
        assert [s["category"] for s in summary] == ["doppia", "tripla"]
        doppia, tripla = summary
        assert (doppia["rooms"], doppia["people"], doppia["partial_rooms"]) == (3, 4, 2)
        assert (tripla["rooms"], tripla["people"], tripla["partial_rooms"]) == (1, 2, 1)
        assert doppia["label"] == "Camere Doppie"


class TestRoomingExports:
    def test_dataframe_blanks_merged_cells(self):
        df = rooming_list_dataframe(build_rooming_rows(allocate(sample_people())))
        assert list(df.columns) == ["Gruppo", "Camera", "Tipologia", "Nominativo", "Data Nascita", "Luogo Nascita"]
        assert len(df) == 6
        assert df["Gruppo"].tolist() == [1, "", "", 2, "", "-"]
        assert df["Camera"].tolist() == [1, "", 2, 3, "", 4]

    def test_html_has_rowspans_and_escapes(self):
        rows = build_rooming_rows(allocate(sample_people()))
        page = rooming_list_html(make_trip(), rows, printed_at=datetime(2026, 6, 1, 9, 30))
        assert 'rowspan="3"' in page
        assert 'rowspan="2"' in page
        assert "Tour &amp; Puglia" in page
        assert "12/06/2026 - 16/06/2026" in page
        assert "Totale partecipanti: 6" in page
        assert "01/06/2026 09:30" in page

    def test_html_without_trip(self):
        page = rooming_list_html(None, [])
        assert "LISTA HOTEL" in page
        assert "Totale partecipanti: 0" in page


class TestRoomingSections:
    def test_rooms_numbered_per_category(self):
        sections = rooming_sections(allocate(sample_people()))
        assert [s["label"] for s in sections] == ["Camere Doppie", "Camere Triple"]

        doppie = sections[0]["rooms"]
        assert [r["room_no"] for r in doppie] == [1, 2, 3]
        assert [p["full_name"] for p in doppie[0]["persons"]] == ["Anna Rossi", "Bruno Rossi"]
        assert doppie[2]["group"] is None
        assert doppie[0]["persons"][0]["date_of_birth"] == "05/03/1970"

        triple = sections[1]["rooms"]
        assert [r["room_no"] for r in triple] == [1]
        assert len(triple[0]["persons"]) == 2

    def test_sections_html(self):
        sections = rooming_sections(allocate(sample_people()))
        page = rooming_sections_html(make_trip(), sections, printed_at=datetime(2026, 6, 1, 9, 30))
        assert "Camere Doppie (3)" in page
        assert "Camere Triple (1)" in page
        assert 'rowspan="2"' in page
        assert "Totale partecipanti: 6" in page
        assert "Tour &amp; Puglia" in page

    def test_empty(self):
        assert rooming_sections(allocate([])) == []
        assert "Totale partecipanti: 0" in rooming_sections_html(None, [])


class TestCompanionRoster:
    def test_groups_ascending_ungrouped_last(self):
        people = [
            make_person("a", "Zeno Alti", None, "singola"),
            make_person("b", "Ugo Bassi", 3, "doppia"),
            make_person("c", "Ivo Conti", 1, "tripla"),
            make_person("d", "Lia Dini", 3, "doppia"),
        ]
        seats = [SeatAssignment(12, "d", "Lia Dini")]
        roster = build_companion_roster(people, seats)

        assert [r["person_id"] for r in roster] == ["c", "b", "d", "a"]
        assert [r["group_rowspan"] for r in roster] == [1, 2, 0, 1]
        assert roster[2]["seat_number"] == 12
        assert roster[0]["seat_number"] is None
        assert roster[0]["room"] == "Camera Tripla"
        assert roster[3]["group"] is None

    def test_no_seats(self):
        roster = build_companion_roster([make_person("a", "A B")])
        assert roster[0]["seat_number"] is None


class TestExplainAllocation:
    def test_steps_per_bucket(self):
        steps = explain_allocation(allocate(sample_people()))
        assert len(steps) == 4
        assert steps[0].startswith("Gruppo 1 - Camera Doppia: 3 persone")
        assert "2 camere" in steps[0]
        assert "non completa (1/2)" in steps[0]
        assert steps[2].startswith("Senza gruppo: 1 persona")
        assert steps[-1] == "Totale: 6 persone in 4 camere"

    def test_empty(self):
        assert explain_allocation(allocate([])) == ["Totale: 0 persone in 0 camere"]


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
