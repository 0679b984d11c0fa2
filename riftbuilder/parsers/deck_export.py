"""
Parser for the Piltover Archive "Export as Text" deck format.

Export format:
    <quantity> <card name>

Example:
    3 Acceptable Losses
    2 Fleeting Thought

    Sideboard:
    1 Acceptable Losses

The exporter uses blank lines liberally and never labels the battlefield
or rune sections, so those buckets are chosen from the card name. Only
the "Sideboard" header is a reliable positional marker.
"""

import re

from riftbuilder.models.card import CardEntry
from riftbuilder.models.deck import DeckBucket, DeckExport
from riftbuilder.models.errors import ParseError

# Pattern: "3 Acceptable Losses"
# Groups: (quantity, card_name)
CARD_LINE_PATTERN = re.compile(r"^([0-9]+)\s+(.+)$")

# "Sideboard" or "Sideboard:" on its own line, any case
SIDEBOARD_HEADER_PATTERN = re.compile(r"^sideboard:?$", re.IGNORECASE)

# Any card whose name contains this (case-insensitive) is a rune
RUNE_MARKER = "rune"

# Closed list of battlefield cards. Saved deck snapshots were bucketed with
# this exact list, so changes here change how old payloads parse.
BATTLEFIELD_NAMES = frozenset(
    {
        "Grove of the God-Willow",
        "Hallowed Tomb",
        "Monastery of Hirana",
        "Navori Fighting Pit",
        "Obelisk of Power",
        "Reaver's Row",
        "Reckoner's Arena",
        "Sigil of the Storm",
        "Startipped Peak",
        "Targon's Peak",
        "The Arena's Greatest",
        "The Candlelit Sanctum",
        "The Dreaming Tree",
        "The Grand Plaza",
        "Trifarian War Camp",
        "Vilemaw's Lair",
        "Void Gate",
        "Windswept Hillock",
        "Zaun Warrens",
    }
)


def classify_card(name: str, section: DeckBucket) -> DeckBucket:
    """
    Pick the bucket for a card.

    Runes and battlefields are recognized by name regardless of where they
    appear; everything else goes to the current section (main or sideboard).
    A reprint that shares a battlefield's name is still a battlefield.
    """
    if RUNE_MARKER in name.lower():
        return DeckBucket.RUNES
    if name in BATTLEFIELD_NAMES:
        return DeckBucket.BATTLEFIELDS
    return section


def parse_card_line(line: str, line_number: int = 0) -> CardEntry:
    """
    Parse a single "<count> <name>" line.

    Raises:
        ParseError: If the line has no leading integer or no name
    """
    match = CARD_LINE_PATTERN.match(line)
    if not match:
        raise ParseError(line_number, line, "expected '<count> <card name>'")

    quantity, name = match.groups()
    return CardEntry(name=name.strip(), count=int(quantity))


def parse_deck_export(export_text: str) -> DeckExport:
    """
    Parse deck export text into a DeckExport.

    Args:
        export_text: Raw "Export as Text" payload

    Returns:
        DeckExport with every card line placed in exactly one bucket

    Raises:
        ParseError: On the first malformed line. No partial deck is returned.
    """
    buckets: dict[DeckBucket, list[CardEntry]] = {bucket: [] for bucket in DeckBucket}
    section = DeckBucket.MAIN

    for line_number, raw_line in enumerate(export_text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue

        if SIDEBOARD_HEADER_PATTERN.match(line):
            section = DeckBucket.SIDEBOARD
            continue

        entry = parse_card_line(line, line_number)
        buckets[classify_card(entry.name, section)].append(entry)

    return DeckExport(
        main=tuple(buckets[DeckBucket.MAIN]),
        battlefields=tuple(buckets[DeckBucket.BATTLEFIELDS]),
        runes=tuple(buckets[DeckBucket.RUNES]),
        sideboard=tuple(buckets[DeckBucket.SIDEBOARD]),
    )
