"""
Reporting helpers over comparison results.

Used by the dashboard API (filtering, sorting, summary) and by the
command-line report.
"""

from collections.abc import Iterable, Sequence
from enum import Enum

from riftbuilder.models.deck import BUCKET_ORDER, ComparisonStatus, DeckComparison

# Missing cards listed per deck before collapsing into "…and N more"
DEFAULT_PREVIEW_LIMIT = 8


class SortOrder(str, Enum):
    """Dashboard sort options."""

    DEFAULT = "default"
    MISSING_ASC = "missing-asc"
    MISSING_DESC = "missing-desc"


def summarize_statuses(comparisons: Iterable[DeckComparison]) -> dict[ComparisonStatus, int]:
    """Count decks per status. All statuses are present, even at zero."""
    summary = {status: 0 for status in ComparisonStatus}
    for comparison in comparisons:
        summary[comparison.status] += 1
    return summary


def filter_comparisons(
    comparisons: Iterable[DeckComparison],
    status: ComparisonStatus | None = None,
    search: str = "",
) -> list[DeckComparison]:
    """
    Keep comparisons matching a status and a deck-name search.

    Args:
        comparisons: Comparison results
        status: Status to keep, or None for all
        search: Case-insensitive substring of the deck label (slug when unlabeled)
    """
    needle = search.strip().lower()
    return [
        comparison
        for comparison in comparisons
        if (status is None or comparison.status is status)
        and needle in comparison.deck.display_name.lower()
    ]


def sort_comparisons(
    comparisons: Iterable[DeckComparison],
    order: SortOrder = SortOrder.DEFAULT,
) -> list[DeckComparison]:
    """Sort by total missing copies, ties broken by label. DEFAULT keeps input order."""
    result = list(comparisons)
    if order is SortOrder.MISSING_ASC:
        result.sort(key=lambda c: (c.total_missing, c.deck.display_name))
    elif order is SortOrder.MISSING_DESC:
        result.sort(key=lambda c: (-c.total_missing, c.deck.display_name))
    return result


def format_missing_cards(comparison: DeckComparison) -> str:
    """
    Render the missing cards as deck export text ("<missing> <name>").

    Cards are grouped per bucket in bucket order; groups are separated by
    a blank line so the output pastes back into a deck builder.
    """
    sections: list[str] = []
    for bucket in BUCKET_ORDER:
        lines = [
            f"{card.missing} {card.name}"
            for card in comparison.missing_cards
            if card.bucket is bucket
        ]
        if lines:
            sections.append("\n".join(lines))
    return "\n\n".join(sections)


def format_report(
    comparisons: Sequence[DeckComparison],
    *,
    decks_source: str,
    inventory_source: str,
    inventory_size: int,
    max_missing: int,
    preview_limit: int = DEFAULT_PREVIEW_LIMIT,
) -> str:
    """Render the plain-text comparison report printed by the CLI."""
    lines = [
        "=== Deck Comparison Report ===",
        f"Deck source: {decks_source} ({len(comparisons)} deck(s))",
        f"Inventory: {inventory_source} ({inventory_size} tracked card(s))",
        f"Near-miss threshold: <= {max_missing} missing copy/copies total.",
        "",
    ]

    for comparison in comparisons:
        missing_label = (
            "complete" if comparison.total_missing == 0 else f"{comparison.total_missing} missing"
        )
        status_label = comparison.status.value.upper()
        lines.append(f"- {comparison.deck.display_name} [{status_label}] — {missing_label}")

        if comparison.missing_cards:
            preview = comparison.missing_cards[:preview_limit]
            for card in preview:
                lines.append(
                    f"    • {card.name}: need {card.missing} more "
                    f"(have {card.owned}/{card.required})"
                )
            hidden = len(comparison.missing_cards) - len(preview)
            if hidden > 0:
                lines.append(f"    • …and {hidden} more card(s)")
        else:
            lines.append("    • All requirements satisfied.")
        lines.append("")

    summary = summarize_statuses(comparisons)
    lines.extend(
        [
            "Summary:",
            f"  Buildable: {summary[ComparisonStatus.BUILDABLE]}",
            f"  Close (<={max_missing} missing): {summary[ComparisonStatus.CLOSE]}",
            f"  Unbuildable: {summary[ComparisonStatus.UNBUILDABLE]}",
        ]
    )
    return "\n".join(lines)
