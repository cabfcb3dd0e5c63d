"""Default configuration constants for the Trip Rooming & Bus Seating Planner."""

# Room categories (canonical keys are the Italian labels used on printed lists)
ROOM_CAPACITIES = {
    "singola": 1,
    "doppia": 2,
    "matrimoniale": 2,
    "tripla": 3,
    "quadrupla": 4,
    "altro": 1,
}
DEFAULT_CATEGORY = "altro"

# Canonical print order
CANONICAL_CATEGORY_ORDER = ["singola", "doppia", "matrimoniale", "tripla", "quadrupla", "altro"]

# Accepted spellings -> canonical key
CATEGORY_ALIASES = {
    "singola": "singola",
    "single": "singola",
    "doppia": "doppia",
    "double": "doppia",
    "matrimoniale": "matrimoniale",
    "matrimonial": "matrimoniale",
    "tripla": "tripla",
    "triple": "tripla",
    "quadrupla": "quadrupla",
    "quadruple": "quadrupla",
    "altro": "altro",
    "other": "altro",
}

ROOM_LABELS = {
    "singola": "Camera Singola",
    "doppia": "Camera Doppia",
    "matrimoniale": "Camera Matrimoniale",
    "tripla": "Camera Tripla",
    "quadrupla": "Camera Quadrupla",
    "altro": "Altra Sistemazione",
}

ROOM_SECTION_LABELS = {
    "singola": "Camere Singole",
    "doppia": "Camere Doppie",
    "matrimoniale": "Camere Matrimoniali",
    "tripla": "Camere Triple",
    "quadrupla": "Camere Quadruple",
    "altro": "Altre Sistemazioni",
}

# Category order within a group: "first_seen" (order of appearance) or "canonical"
CATEGORY_ORDER_MODES = ["first_seen", "canonical"]
DEFAULT_CATEGORY_ORDER = "first_seen"

# Legacy free-text notes, e.g. "Pagato acconto | Camera: doppia"
LEGACY_NOTES_PREFIX = "Camera:"
PARSE_LEGACY_NOTES = True

# Bus layout
DEFAULT_BUS_ROWS = 11
DEFAULT_SEATS_PER_ROW = 4
DEFAULT_LAST_ROW_SEATS = 5
MIN_BUS_ROWS = 3
MIN_SEATS_PER_ROW = 2
MAX_SEATS_PER_ROW = 4
MIN_LAST_ROW_SEATS = 3
MAX_LAST_ROW_SEATS = 6

# Seat states
SEAT_FREE = "free"
SEAT_OCCUPIED = "occupied"
SEAT_SELECTED = "selected"

SEAT_STATE_COLORS = {
    SEAT_FREE: "#22C55E",
    SEAT_OCCUPIED: "#EF4444",
    SEAT_SELECTED: "#3B82F6",
}

SEAT_STATE_LABELS = {
    SEAT_FREE: "Libero",
    SEAT_OCCUPIED: "Occupato",
    SEAT_SELECTED: "Selezionato",
}

# Bus presets: total seats = (rows - 1) * seats_per_row + last_row_seats
BUS_PRESETS = [
    {"label": "Minibus 19 posti", "rows": 5, "last_row_seats": 3, "has_wc": False, "layout_type": "minibus"},
    {"label": "Minibus 28 posti", "rows": 7, "last_row_seats": 4, "has_wc": False, "layout_type": "minibus"},
    {"label": "Midicoach 35 posti", "rows": 9, "last_row_seats": 3, "has_wc": False, "layout_type": "midi"},
    {"label": "GT Medium 45 posti", "rows": 11, "last_row_seats": 5, "has_wc": False, "layout_type": "gt_medium"},
    {"label": "GT 49 posti", "rows": 12, "last_row_seats": 5, "has_wc": False, "layout_type": "gt_standard"},
    {"label": "GT 53 posti", "rows": 13, "last_row_seats": 5, "has_wc": False, "layout_type": "gt_standard"},
    {"label": "GT 54 posti", "rows": 13, "last_row_seats": 6, "has_wc": False, "layout_type": "gt_standard"},
    {"label": "GT 57 posti", "rows": 14, "last_row_seats": 5, "has_wc": False, "layout_type": "gt_large"},
    {"label": "GT 61 posti", "rows": 15, "last_row_seats": 5, "has_wc": False, "layout_type": "gt_xlarge"},
    {"label": "Bipiano 79 posti (WC)", "rows": 20, "last_row_seats": 3, "has_wc": True, "layout_type": "double_decker"},
]

# Printed date format
DATE_FORMAT = "%d/%m/%Y"
