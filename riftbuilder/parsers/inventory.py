"""
Inventory normalization.

Accepts the inventory shapes produced by the scraper or written by hand
and reduces them to the canonical {card name: owned count} mapping.

Accepted shapes, in precedence order:
    1. [{"name": ..., "count": ...}, ...]   one row per printing, summed
    2. {"cards": [...]}                     rows nested under "cards"
    3. {"Card Name": 3, ...}                plain name -> count map
"""

import math
from collections.abc import Iterable, Mapping
from typing import Any

from riftbuilder.models.card import InventoryCard
from riftbuilder.models.deck import Inventory
from riftbuilder.models.errors import UnsupportedFormatError


def coerce_count(value: Any) -> int | None:
    """
    Convert a raw count to a non-negative integer.

    Numbers and numeric strings are floored and clamped at zero. Blank
    strings and null count as zero. Returns None for anything non-finite
    or non-numeric, which callers treat as "skip this entry".
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return max(0, value)
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return max(0, math.floor(number))


def _is_row_list(source: Any) -> bool:
    return isinstance(source, list | tuple)


def _normalize_rows(rows: Iterable[Any]) -> Inventory:
    inventory: Inventory = {}
    for row in rows:
        if not isinstance(row, Mapping) or "name" not in row or "count" not in row:
            continue
        if row["name"] is None:
            continue

        name = str(row["name"]).strip()
        count = coerce_count(row["count"])
        if not name or count is None:
            continue

        # Same card in several finishes/conditions
        inventory[name] = inventory.get(name, 0) + count
    return inventory


def _normalize_mapping(source: Mapping[Any, Any]) -> Inventory:
    inventory: Inventory = {}
    for raw_name, value in source.items():
        name = str(raw_name).strip()
        count = coerce_count(value)
        if not name or count is None:
            continue
        inventory[name] = inventory.get(name, 0) + count
    return inventory


def normalize_inventory(source: Any) -> Inventory:
    """
    Normalize any accepted inventory shape into an Inventory mapping.

    Args:
        source: Decoded JSON value (list of rows, {"cards": [...]}, or map)

    Returns:
        Mapping of card name to owned count. Keys are never empty.

    Raises:
        UnsupportedFormatError: If source is not a list or an object
    """
    if _is_row_list(source):
        return _normalize_rows(source)

    if isinstance(source, Mapping):
        cards = source.get("cards")
        if _is_row_list(cards):
            return _normalize_rows(cards)
        return _normalize_mapping(source)

    raise UnsupportedFormatError(type(source).__name__)


def inventory_from_payload(payload: Any) -> Inventory:
    """
    Read an inventory file payload ({"user", "cards", "counts"}).

    Prefers the precomputed "counts" map and falls back to normalizing
    the whole payload (which picks up "cards").
    """
    if isinstance(payload, Mapping):
        counts = payload.get("counts")
        if isinstance(counts, Mapping):
            return _normalize_mapping(counts)
    return normalize_inventory(payload)


def aggregate_counts(cards: Iterable[InventoryCard]) -> Inventory:
    """
    Sum scraped inventory rows into per-name totals.

    This is what the scraper stores under "counts" in the inventory file.
    """
    counts: Inventory = {}
    for card in cards:
        name = card.name.strip()
        if not name:
            continue
        counts[name] = counts.get(name, 0) + max(0, card.count)
    return counts
