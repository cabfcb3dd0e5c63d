"""Schema and business validation for uploaded trip data."""

from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from models.bus import BusLayout
from config.defaults import (
    CATEGORY_ALIASES, MIN_BUS_ROWS, MIN_SEATS_PER_ROW, MAX_SEATS_PER_ROW,
    MIN_LAST_ROW_SEATS, MAX_LAST_ROW_SEATS,
)


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


PARTICIPANT_REQUIRED_COLUMNS = [
    "ID",
    "Full Name",
]

TRIP_REQUIRED_COLUMNS = [
    "Trip ID",
    "Title",
    "Destination",
]

BUS_REQUIRED_COLUMNS = [
    "Rows",
]

SEAT_REQUIRED_COLUMNS = [
    "Seat Number",
    "Participant ID",
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_participants(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, PARTICIPANT_REQUIRED_COLUMNS, "Participants")
    if not result.is_valid:
        return result

    ids = df["ID"].astype(str).str.strip()
    dupes = ids[ids.duplicated(keep=False)]
    if not dupes.empty:
        result.is_valid = False
        result.errors.append(f"Participants: Duplicate IDs: {sorted(dupes.unique().tolist())}")

    names = df["Full Name"]
    if names.isna().any() or (names.astype(str).str.strip() == "").any():
        result.is_valid = False
        result.errors.append("Participants: Full Name cannot be empty.")

    if "Group Number" in df.columns:
        groups = pd.to_numeric(df["Group Number"], errors="coerce")
        not_numeric = df["Group Number"].notna() & groups.isna()
        if not_numeric.any():
            result.is_valid = False
            result.errors.append("Participants: Group Number must be a whole number.")
        elif (groups.dropna() <= 0).any():
            result.warnings.append(
                "Participants: Some group numbers are zero or negative. "
                "They are kept as-is and sorted before the positive groups."
            )

    if "Room Type" in df.columns:
        room_types = df["Room Type"].dropna().astype(str).str.strip().str.lower()
        unknown = sorted(set(t for t in room_types if t and t not in CATEGORY_ALIASES))
        if unknown:
            result.warnings.append(
                f"Participants: Unknown room types {unknown} will be treated as 'altro' (capacity 1)."
            )
    elif "Notes" in df.columns:
        result.warnings.append(
            "Participants: No 'Room Type' column; room types will be read from legacy 'Camera: ...' notes."
        )
    else:
        result.warnings.append(
            "Participants: No room information; everyone is placed as 'altro' (capacity 1)."
        )

    return result


def validate_trip(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, TRIP_REQUIRED_COLUMNS, "Trip")
    if not result.is_valid:
        return result

    if "Departure Date" in df.columns and "Return Date" in df.columns:
        dep = pd.to_datetime(df["Departure Date"].iloc[0], dayfirst=True, errors="coerce")
        ret = pd.to_datetime(df["Return Date"].iloc[0], dayfirst=True, errors="coerce")
        if pd.notna(dep) and pd.notna(ret) and ret < dep:
            result.is_valid = False
            result.errors.append("Trip: Return Date is before Departure Date.")
    return result


def validate_bus_layout(layout: BusLayout) -> ValidationResult:
    """Bounds of the configurable bus-type model."""
    result = ValidationResult()
    if layout.rows < MIN_BUS_ROWS:
        result.is_valid = False
        result.errors.append(f"Bus: At least {MIN_BUS_ROWS} rows required (got {layout.rows}).")
    if not MIN_SEATS_PER_ROW <= layout.seats_per_row <= MAX_SEATS_PER_ROW:
        result.is_valid = False
        result.errors.append(
            f"Bus: Seats per row must be between {MIN_SEATS_PER_ROW} and {MAX_SEATS_PER_ROW} "
            f"(got {layout.seats_per_row})."
        )
    if layout.last_row_seats is not None and not MIN_LAST_ROW_SEATS <= layout.last_row_seats <= MAX_LAST_ROW_SEATS:
        result.is_valid = False
        result.errors.append(
            f"Bus: Last row seats must be between {MIN_LAST_ROW_SEATS} and {MAX_LAST_ROW_SEATS} "
            f"(got {layout.last_row_seats})."
        )
    return result


def validate_seat_assignments(
    df: pd.DataFrame,
    layout: Optional[BusLayout],
    participant_ids: List[str],
) -> ValidationResult:
    result = _check_required_columns(df, SEAT_REQUIRED_COLUMNS, "Seats")
    if not result.is_valid:
        return result

    numeric = pd.to_numeric(df["Seat Number"], errors="coerce")
    bad = df.loc[numeric.isna() | (numeric % 1 != 0), "Seat Number"]
    if not bad.empty:
        result.is_valid = False
        result.errors.append(f"Seats: Seat Number must be a whole number (got {bad.astype(str).tolist()})")
    seats = numeric.dropna()
    seats = seats[seats % 1 == 0].astype(int)

    dupe_seats = seats[seats.duplicated(keep=False)]
    if not dupe_seats.empty:
        result.is_valid = False
        result.errors.append(f"Seats: Seats assigned twice: {sorted(dupe_seats.unique().tolist())}")

    holders = df["Participant ID"].astype(str).str.strip()
    dupe_holders = holders[holders.duplicated(keep=False)]
    if not dupe_holders.empty:
        result.is_valid = False
        result.errors.append(
            f"Seats: Participants holding more than one seat: {sorted(dupe_holders.unique().tolist())}"
        )

    if layout is not None and not seats.empty:
        outside = sorted(s for s in seats.unique().tolist() if s < 1 or s > layout.total_seats)
        if outside:
            result.is_valid = False
            result.errors.append(f"Seats: Seats outside the bus layout (1-{layout.total_seats}): {outside}")

    unknown = sorted(set(holders) - set(participant_ids))
    if unknown:
        result.warnings.append(f"Seats: Unknown participants {unknown} will be ignored.")

    return result
