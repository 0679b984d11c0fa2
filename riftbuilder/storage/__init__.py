from riftbuilder.storage.snapshots import (
    comparison_to_dict,
    deck_export_from_dict,
    deck_export_to_dict,
    deck_record_from_dict,
    deck_record_to_dict,
    load_decks,
    load_inventory,
    write_comparisons,
)

__all__ = [
    "comparison_to_dict",
    "deck_export_from_dict",
    "deck_export_to_dict",
    "deck_record_from_dict",
    "deck_record_to_dict",
    "load_decks",
    "load_inventory",
    "write_comparisons",
]
