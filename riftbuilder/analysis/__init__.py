from riftbuilder.analysis.comparison import (
    DEFAULT_MAX_MISSING,
    Requirement,
    classify_status,
    collect_deck_requirements,
    compare_deck,
    compare_decks,
    deck_structure,
    ensure_parsed,
)
from riftbuilder.analysis.report import (
    SortOrder,
    filter_comparisons,
    format_missing_cards,
    format_report,
    sort_comparisons,
    summarize_statuses,
)

__all__ = [
    "DEFAULT_MAX_MISSING",
    "Requirement",
    "SortOrder",
    "classify_status",
    "collect_deck_requirements",
    "compare_deck",
    "compare_decks",
    "deck_structure",
    "ensure_parsed",
    "filter_comparisons",
    "format_missing_cards",
    "format_report",
    "sort_comparisons",
    "summarize_statuses",
]
