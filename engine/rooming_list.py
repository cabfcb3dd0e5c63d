"""Rooming-list builder: printable hotel list with merged group and room cells."""

import html
from datetime import date, datetime
from typing import List, Optional

import pandas as pd

from models.room import AllocationResult
from models.trip import Trip
from config.defaults import (
    ROOM_LABELS, ROOM_SECTION_LABELS, CANONICAL_CATEGORY_ORDER, DATE_FORMAT,
)


def _fmt_date(value: Optional[date]) -> str:
    return value.strftime(DATE_FORMAT) if value else "-"


def build_rooming_rows(result: AllocationResult) -> List[dict]:
    """One row per person, in print order.

    `group_rowspan` / `room_rowspan` carry the merged-cell height on the first
    row of a group / room and 0 on the rows it covers.
    """
    rows = []
    grouped = [(g, result.groups[g]) for g in sorted(result.groups)]
    blocks = grouped + [(None, [u]) for u in result.ungrouped]

    for group_number, units in blocks:
        group_size = sum(u.occupancy for u in units)
        first_in_group = True
        for unit in units:
            for pos, person in enumerate(unit.persons):
                rows.append({
                    "group": group_number,
                    "room_no": unit.index,
                    "category": unit.category,
                    "category_label": ROOM_LABELS.get(unit.category, unit.category),
                    "person_id": person.person_id,
                    "full_name": person.full_name,
                    "date_of_birth": _fmt_date(person.date_of_birth),
                    "place_of_birth": person.place_of_birth or "-",
                    "group_rowspan": group_size if first_in_group else 0,
                    "room_rowspan": unit.occupancy if pos == 0 else 0,
                })
                first_in_group = False
    return rows


def rooming_summary(result: AllocationResult) -> List[dict]:
    """Rooms and people per category, canonical order, empty categories omitted."""
    counts = {}
    for unit in result.iter_units():
        entry = counts.setdefault(unit.category, {"rooms": 0, "people": 0, "partial_rooms": 0})
        entry["rooms"] += 1
        entry["people"] += unit.occupancy
        if not unit.is_full:
            entry["partial_rooms"] += 1

    summary = []
    for category in CANONICAL_CATEGORY_ORDER:
        if category not in counts:
            continue
        summary.append({
            "category": category,
            "label": ROOM_SECTION_LABELS[category],
            **counts[category],
        })
    return summary


def rooming_list_dataframe(rows: List[dict]) -> pd.DataFrame:
    """Display/CSV frame; merged cells are shown only on their first row."""
    records = []
    for r in rows:
        records.append({
            "Gruppo": (r["group"] if r["group"] is not None else "-") if r["group_rowspan"] else "",
            "Camera": r["room_no"] if r["room_rowspan"] else "",
            "Tipologia": r["category_label"] if r["room_rowspan"] else "",
            "Nominativo": r["full_name"],
            "Data Nascita": r["date_of_birth"],
            "Luogo Nascita": r["place_of_birth"],
        })
    return pd.DataFrame(
        records,
        columns=["Gruppo", "Camera", "Tipologia", "Nominativo", "Data Nascita", "Luogo Nascita"],
    )


def rooming_sections(result: AllocationResult) -> List[dict]:
    """Rooms split by category in canonical order, numbered from 1 within each section."""
    by_category = {}
    for unit in result.iter_units():
        by_category.setdefault(unit.category, []).append(unit)

    sections = []
    for category in CANONICAL_CATEGORY_ORDER:
        units = by_category.get(category)
        if not units:
            continue
        rooms = []
        for number, unit in enumerate(units, start=1):
            rooms.append({
                "room_no": number,
                "group": unit.group_number,
                "persons": [{
                    "person_id": p.person_id,
                    "full_name": p.full_name,
                    "date_of_birth": _fmt_date(p.date_of_birth),
                    "place_of_birth": p.place_of_birth or "-",
                } for p in unit.persons],
            })
        sections.append({
            "category": category,
            "label": ROOM_SECTION_LABELS[category],
            "rooms": rooms,
        })
    return sections


_PAGE_STYLE = (
    "body{font-family:sans-serif;font-size:12px;margin:20px}"
    "table{width:100%;border-collapse:collapse;margin-bottom:16px}"
    "th,td{border:1px solid #999;padding:4px 6px;text-align:left;vertical-align:top}"
    "th{background:#eee}td.group,td.room{font-weight:bold;text-align:center}"
    "tr{page-break-inside:avoid}thead{display:table-header-group}"
    "h3{border-bottom:1px solid #999;padding-bottom:4px}"
)


def _html_page(trip: Optional[Trip], content: str, participant_count: int, printed_at: Optional[datetime]) -> str:
    esc = html.escape
    printed_at = printed_at or datetime.now()

    header = ""
    if trip:
        header = (
            f"<h1>{esc(trip.title)}</h1>"
            f"<p>{esc(trip.destination)}</p>"
            f"<p>{_fmt_date(trip.departure_date)} - {_fmt_date(trip.return_date)}</p>"
        )

    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\"><title>Lista Hotel</title>"
        f"<style>{_PAGE_STYLE}</style></head><body>"
        f"{header}<h2>LISTA HOTEL</h2>"
        f"{content}"
        f"<p>Totale partecipanti: {participant_count}</p>"
        f"<p>Data generazione: {printed_at.strftime(DATE_FORMAT + ' %H:%M')}</p>"
        "</body></html>"
    )


def rooming_list_html(trip: Optional[Trip], rows: List[dict], printed_at: Optional[datetime] = None) -> str:
    """Standalone printable HTML page of the rooming list."""
    esc = html.escape
    body_rows = []
    for r in rows:
        cells = []
        if r["group_rowspan"]:
            label = r["group"] if r["group"] is not None else "-"
            cells.append(f'<td class="group" rowspan="{r["group_rowspan"]}">{esc(str(label))}</td>')
        if r["room_rowspan"]:
            cells.append(f'<td class="room" rowspan="{r["room_rowspan"]}">{r["room_no"]}</td>')
            cells.append(f'<td rowspan="{r["room_rowspan"]}">{esc(r["category_label"])}</td>')
        cells.append(f"<td>{esc(r['full_name'])}</td>")
        cells.append(f"<td>{esc(r['date_of_birth'])}</td>")
        cells.append(f"<td>{esc(r['place_of_birth'])}</td>")
        body_rows.append("<tr>" + "".join(cells) + "</tr>")

    table = (
        "<table><thead><tr><th>Gr.</th><th>Camera</th><th>Tipologia</th>"
        "<th>Nominativo</th><th>Data Nascita</th><th>Luogo Nascita</th></tr></thead>"
        f"<tbody>{''.join(body_rows)}</tbody></table>"
    )
    return _html_page(trip, table, len(rows), printed_at)


def rooming_sections_html(trip: Optional[Trip], sections: List[dict], printed_at: Optional[datetime] = None) -> str:
    """Printable HTML with one table per room category, e.g. 'Camere Doppie (3)'."""
    esc = html.escape
    parts = []
    participant_count = 0
    for section in sections:
        body_rows = []
        for room in section["rooms"]:
            persons = room["persons"]
            participant_count += len(persons)
            for pos, p in enumerate(persons):
                room_cell = f'<td class="room" rowspan="{len(persons)}">{room["room_no"]}</td>' if pos == 0 else ""
                body_rows.append(
                    f"<tr>{room_cell}<td>{esc(p['full_name'])}</td>"
                    f"<td>{esc(p['date_of_birth'])}</td><td>{esc(p['place_of_birth'])}</td></tr>"
                )
        parts.append(
            f"<h3>{esc(section['label'])} ({len(section['rooms'])})</h3>"
            "<table><thead><tr><th>Camera</th><th>Nominativo</th>"
            "<th>Data Nascita</th><th>Luogo Nascita</th></tr></thead>"
            f"<tbody>{''.join(body_rows)}</tbody></table>"
        )
    return _html_page(trip, "".join(parts), participant_count, printed_at)
