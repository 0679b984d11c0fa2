from riftbuilder.parsers.deck_export import (
    BATTLEFIELD_NAMES,
    classify_card,
    parse_card_line,
    parse_deck_export,
)
from riftbuilder.parsers.inventory import (
    aggregate_counts,
    coerce_count,
    inventory_from_payload,
    normalize_inventory,
)

__all__ = [
    "BATTLEFIELD_NAMES",
    "aggregate_counts",
    "classify_card",
    "coerce_count",
    "inventory_from_payload",
    "normalize_inventory",
    "parse_card_line",
    "parse_deck_export",
]
