"""
Deck-vs-inventory comparison.

Measures how far an inventory is from completing each deck and classifies
the deck as buildable, close or unbuildable against a caller-chosen
threshold. Every function here is pure: no I/O, no caching, no shared
state, so callers can recompute freely whenever inputs change.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from riftbuilder.models.deck import (
    BUCKET_ORDER,
    ComparisonStatus,
    DeckBucket,
    DeckComparison,
    DeckExport,
    DeckRecord,
    Inventory,
    MissingCard,
)
from riftbuilder.models.errors import MissingDataError
from riftbuilder.parsers.deck_export import parse_deck_export

DEFAULT_MAX_MISSING = 4


@dataclass(frozen=True, slots=True)
class Requirement:
    """A card entry tagged with the bucket it came from."""

    name: str
    count: int
    bucket: DeckBucket


def deck_structure(deck: DeckRecord) -> DeckExport:
    """
    Return the parsed structure of a deck, parsing the export text if needed.

    Raises:
        MissingDataError: If the deck has neither parsed data nor export text
        ParseError: If the export text is malformed
    """
    if deck.parsed is not None:
        return deck.parsed

    if not deck.export_text:
        raise MissingDataError(deck.display_name)

    return parse_deck_export(deck.export_text)


def ensure_parsed(deck: DeckRecord) -> DeckRecord:
    """Return the deck with its parsed structure populated."""
    if deck.parsed is not None:
        return deck
    return deck.with_parsed(deck_structure(deck))


def collect_deck_requirements(deck: DeckExport) -> list[Requirement]:
    """Flatten a deck into bucket-major, source-ordered requirements."""
    return [
        Requirement(name=entry.name, count=entry.count, bucket=bucket)
        for bucket in BUCKET_ORDER
        for entry in deck.bucket(bucket)
    ]


def classify_status(total_missing: int, max_missing: int) -> ComparisonStatus:
    """
    Classify a deck by its total missing copies.

    ``max_missing`` is inclusive and unbounded; with 0 nothing is "close".
    """
    if total_missing == 0:
        return ComparisonStatus.BUILDABLE
    if total_missing <= max_missing:
        return ComparisonStatus.CLOSE
    return ComparisonStatus.UNBUILDABLE


def compare_deck(
    deck: DeckRecord,
    inventory: Inventory,
    max_missing: int = DEFAULT_MAX_MISSING,
) -> DeckComparison:
    """
    Compare a single deck against an inventory.

    Args:
        deck: Deck record, parsed or with raw export text
        inventory: Owned counts by card name
        max_missing: Highest total shortfall still classified as "close"

    Returns:
        DeckComparison with per-card shortfalls and the deck status
    """
    hydrated = ensure_parsed(deck)

    missing_cards: list[MissingCard] = []
    total_missing = 0

    for requirement in collect_deck_requirements(deck_structure(hydrated)):
        owned = inventory.get(requirement.name, 0)
        if owned < requirement.count:
            deficit = requirement.count - owned
            total_missing += deficit
            missing_cards.append(
                MissingCard(
                    name=requirement.name,
                    required=requirement.count,
                    owned=owned,
                    missing=deficit,
                    bucket=requirement.bucket,
                )
            )

    return DeckComparison(
        deck=hydrated,
        missing_cards=tuple(missing_cards),
        total_missing=total_missing,
        status=classify_status(total_missing, max_missing),
    )


def compare_decks(
    decks: Iterable[DeckRecord],
    inventory: Inventory,
    max_missing: int = DEFAULT_MAX_MISSING,
) -> list[DeckComparison]:
    """
    Compare every deck against the same inventory, preserving deck order.

    A failure on any deck propagates and aborts the whole batch.
    """
    return [compare_deck(deck, inventory, max_missing) for deck in decks]
