"""Capacity-aware grouping allocator: splits travel groups into hotel rooms."""

import logging
import re
import unicodedata
from typing import Dict, List, Optional

from models.person import Person
from models.room import AllocationResult, RoomUnit
from config.defaults import (
    ROOM_CAPACITIES, DEFAULT_CATEGORY, CATEGORY_ALIASES,
    CANONICAL_CATEGORY_ORDER, DEFAULT_CATEGORY_ORDER, LEGACY_NOTES_PREFIX,
)
from config.logging_config import get_logger

logger = get_logger(__name__, logging.DEBUG)

_NOTES_PATTERN = re.compile(re.escape(LEGACY_NOTES_PREFIX) + r"\s*([A-Za-zÀ-ÿ]+)", re.IGNORECASE)


def normalize_category(value: Optional[str]) -> str:
    """Map an Italian or English room label to its canonical key; unknown -> 'altro'."""
    if value is None:
        return DEFAULT_CATEGORY
    key = str(value).strip().lower()
    return CATEGORY_ALIASES.get(key, DEFAULT_CATEGORY)


def parse_category_from_notes(notes: Optional[str]) -> Optional[str]:
    """Extract the room category from legacy notes such as 'Acconto | Camera: doppia'.

    Returns None when the notes carry no recognisable room category.
    """
    if not notes:
        return None
    match = _NOTES_PATTERN.search(str(notes))
    if not match:
        return None
    key = match.group(1).strip().lower()
    if key not in CATEGORY_ALIASES:
        return None
    return CATEGORY_ALIASES[key]


def category_capacity(category: Optional[str]) -> int:
    """Fixed room capacity for a category; never zero."""
    return ROOM_CAPACITIES.get(normalize_category(category), 1)


def format_surname_first(full_name: str) -> str:
    """'Mario Rossi' -> 'ROSSI Mario'. A single token is just upper-cased."""
    parts = (full_name or "").split()
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0].upper()
    return f"{parts[-1].upper()} {' '.join(parts[:-1])}"


def collation_key(text: str) -> str:
    """Primary-strength sort key: accents stripped, case folded ('Èrcoli' sorts with 'Ercoli')."""
    decomposed = unicodedata.normalize("NFKD", text or "")
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def _order_categories(categories: List[str], mode: str) -> List[str]:
    if mode == "canonical":
        return sorted(categories, key=CANONICAL_CATEGORY_ORDER.index)
    return categories


def _split_bucket(
    bucket: List[Person],
    category: str,
    group_number: Optional[int],
) -> List[RoomUnit]:
    capacity = ROOM_CAPACITIES[category]
    ordered = sorted(bucket, key=lambda p: collation_key(p.surname))
    units = []
    for start in range(0, len(ordered), capacity):
        units.append(RoomUnit(
            category=category,
            capacity=capacity,
            group_number=group_number,
            persons=ordered[start:start + capacity],
        ))
    return units


def allocate(
    people: List[Person],
    rule_config: Optional[dict] = None,
) -> AllocationResult:
    """Partition people into rooms, keeping travel groups together.

    Grouped people are bucketed per (group, category), sorted by surname and
    chunked by category capacity; the last room of a bucket may be partial.
    People without a group always get a room of their own. Units are numbered
    in print order: ascending group number, category order, bucket order,
    then the ungrouped singletons in input order.
    """
    cfg = rule_config or {}
    order_mode = cfg.get("category_order", DEFAULT_CATEGORY_ORDER)

    # Step 1: grouped vs ungrouped, sub-partitioned by category (insertion order kept)
    buckets: Dict[int, Dict[str, List[Person]]] = {}
    loners: List[Person] = []
    for person in people:
        category = normalize_category(person.category)
        if person.group_number is None:
            loners.append(person)
            continue
        group_buckets = buckets.setdefault(person.group_number, {})
        group_buckets.setdefault(category, []).append(person)

    result = AllocationResult()
    index = 0

    # Step 2: per group, per category, sorted and split by capacity
    for group_number in sorted(buckets):
        group_buckets = buckets[group_number]
        units: List[RoomUnit] = []
        for category in _order_categories(list(group_buckets), order_mode):
            units.extend(_split_bucket(group_buckets[category], category, group_number))
        for unit in units:
            index += 1
            unit.index = index
        result.groups[group_number] = units
        logger.debug(
            "Group %s: %d people -> %d rooms", group_number,
            sum(len(b) for b in group_buckets.values()), len(units),
        )

    # Step 3: ungrouped people are never merged
    for person in loners:
        index += 1
        category = normalize_category(person.category)
        result.ungrouped.append(RoomUnit(
            category=category,
            capacity=ROOM_CAPACITIES[category],
            group_number=None,
            persons=[person],
            index=index,
        ))

    logger.debug("Allocated %d people into %d rooms", len(people), index)
    return result
