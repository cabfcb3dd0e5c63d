"""File upload parsing: CSV/XLSX into typed model lists."""

from datetime import date
from typing import Dict, List, Optional

import pandas as pd

from models.person import Person
from models.trip import Trip
from models.bus import BusLayout, SeatAssignment
from engine.room_allocator import normalize_category, parse_category_from_notes
from config.defaults import (
    DEFAULT_CATEGORY, PARSE_LEGACY_NOTES, DEFAULT_SEATS_PER_ROW,
)
from config.logging_config import get_logger

logger = get_logger(__name__)


def _opt_str(row: pd.Series, column: str) -> Optional[str]:
    if column not in row.index or pd.isna(row[column]):
        return None
    text = str(row[column]).strip()
    return text or None


def _opt_int(row: pd.Series, column: str) -> Optional[int]:
    if column not in row.index or pd.isna(row[column]):
        return None
    return int(float(row[column]))


def _opt_date(row: pd.Series, column: str) -> Optional[date]:
    if column not in row.index or pd.isna(row[column]):
        return None
    return pd.to_datetime(row[column], dayfirst=True).date()


def _opt_bool(row: pd.Series, column: str, default: bool = False) -> bool:
    if column not in row.index or pd.isna(row[column]):
        return default
    return str(row[column]).strip().lower() in ("true", "1", "yes", "si", "sì", "x")


def resolve_category(room_type: Optional[str], notes: Optional[str], parse_notes: bool = True) -> str:
    """Structured room type first; legacy 'Camera: ...' notes only as fallback."""
    if room_type:
        return normalize_category(room_type)
    if parse_notes:
        legacy = parse_category_from_notes(notes)
        if legacy:
            return legacy
    return DEFAULT_CATEGORY


def parse_participants(df: pd.DataFrame, rule_config: Optional[dict] = None) -> List[Person]:
    """Convert a participants DataFrame into Person objects."""
    cfg = rule_config or {}
    parse_notes = cfg.get("parse_legacy_notes", PARSE_LEGACY_NOTES)

    people = []
    legacy_count = 0
    for _, row in df.iterrows():
        room_type = _opt_str(row, "Room Type")
        notes = _opt_str(row, "Notes")
        category = resolve_category(room_type, notes, parse_notes)
        if not room_type and category != DEFAULT_CATEGORY:
            legacy_count += 1
        people.append(Person(
            person_id=str(row["ID"]).strip(),
            full_name=" ".join(str(row["Full Name"]).split()),
            group_number=_opt_int(row, "Group Number"),
            category=category,
            date_of_birth=_opt_date(row, "Date of Birth"),
            place_of_birth=_opt_str(row, "Place of Birth"),
            phone=_opt_str(row, "Phone"),
        ))

    if legacy_count:
        logger.warning("Room type read from legacy notes for %d participants", legacy_count)
    logger.info("Parsed %d participants", len(people))
    return people


def parse_trip(df: pd.DataFrame) -> Optional[Trip]:
    """First row of the trip sheet, or None when empty."""
    if df.empty:
        return None
    row = df.iloc[0]
    return Trip(
        trip_id=str(row["Trip ID"]).strip(),
        title=str(row["Title"]).strip(),
        destination=str(row["Destination"]).strip(),
        departure_date=_opt_date(row, "Departure Date"),
        return_date=_opt_date(row, "Return Date"),
        companion_name=_opt_str(row, "Companion"),
    )


def parse_bus_layout(df: pd.DataFrame) -> Optional[BusLayout]:
    """First row of the bus sheet, or None when empty."""
    if df.empty:
        return None
    row = df.iloc[0]
    seats_per_row = _opt_int(row, "Seats per Row")
    return BusLayout(
        rows=int(row["Rows"]),
        seats_per_row=seats_per_row if seats_per_row is not None else DEFAULT_SEATS_PER_ROW,
        last_row_seats=_opt_int(row, "Last Row Seats"),
        has_wc=_opt_bool(row, "Has WC"),
        layout_type=_opt_str(row, "Layout Type") or "gt_standard",
        name=_opt_str(row, "Name") or "",
    )


def parse_seat_assignments(df: pd.DataFrame, people: Optional[List[Person]] = None) -> List[SeatAssignment]:
    """Convert a seats DataFrame into SeatAssignment objects, names resolved from people."""
    names: Dict[str, str] = {p.person_id: p.full_name for p in (people or [])}
    assignments = []
    for _, row in df.iterrows():
        person_id = str(row["Participant ID"]).strip()
        assignments.append(SeatAssignment(
            seat_number=int(row["Seat Number"]),
            person_id=person_id,
            person_name=names.get(person_id, ""),
        ))
    assignments.sort(key=lambda a: a.seat_number)
    return assignments


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


# Expected sheet names for multi-tab Excel (case-insensitive matching)
SHEET_ALIASES = {
    "participants": ["participants", "partecipanti", "passengers", "roster"],
    "trip": ["trip", "viaggio"],
    "bus": ["bus", "bus layout", "pullman"],
    "seats": ["seats", "posti", "seat assignments", "posti bus"],
}
OPTIONAL_SHEETS = ("trip", "bus", "seats")


def _match_sheet(sheet_names: List[str], category: str) -> Optional[str]:
    """Find a sheet name matching the given category, or None."""
    aliases = SHEET_ALIASES[category]
    lower_map = {s.lower().strip(): s for s in sheet_names}
    for alias in aliases:
        if alias in lower_map:
            return lower_map[alias]
    return None


def load_multi_sheet_excel(uploaded_file) -> Dict[str, Optional[pd.DataFrame]]:
    """Load an Excel workbook with a Participants tab and optional Trip, Bus and Seats tabs.

    Sheet names are matched case-insensitively (English or Italian).
    Returns a dict keyed by 'participants', 'trip', 'bus', 'seats'; missing
    optional sheets map to None.
    """
    xl = pd.ExcelFile(uploaded_file, engine="openpyxl")
    sheet_names = xl.sheet_names

    participants_sheet = _match_sheet(sheet_names, "participants")
    if participants_sheet is None:
        raise ValueError(
            "Could not find a sheet for 'participants'. "
            f"Expected one of: {SHEET_ALIASES['participants']}. "
            f"Found sheets: {sheet_names}"
        )

    frames = {"participants": pd.read_excel(xl, sheet_name=participants_sheet)}
    for category in OPTIONAL_SHEETS:
        sheet = _match_sheet(sheet_names, category)
        frames[category] = pd.read_excel(xl, sheet_name=sheet) if sheet else None
    return frames


def load_csv_path(path: str) -> pd.DataFrame:
    """Load a CSV file from a local path."""
    return pd.read_csv(path)
