"""
Flat JSON snapshot files.

Deck snapshots are written by the deck scraper as an array of
{slug, label, url, exportText, parsed?}. Inventory snapshots are written
by the inventory scraper as {user, cards, counts}. Comparison results are
written back out for the dashboard.

JSON keys follow the scraper's camelCase naming.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from riftbuilder.models.card import CardEntry
from riftbuilder.models.deck import (
    BUCKET_ORDER,
    DeckComparison,
    DeckExport,
    DeckRecord,
    Inventory,
    MissingCard,
)
from riftbuilder.models.errors import SnapshotFormatError
from riftbuilder.parsers.inventory import inventory_from_payload

logger = logging.getLogger(__name__)


def _card_entries(raw: Any, bucket: str) -> tuple[CardEntry, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise SnapshotFormatError(f"parsed.{bucket} must be an array")

    entries: list[CardEntry] = []
    for item in raw:
        if not isinstance(item, Mapping) or "name" not in item or "count" not in item:
            raise SnapshotFormatError(f"parsed.{bucket} entries need 'name' and 'count'")
        name, count = item["name"], item["count"]
        if not isinstance(name, str):
            raise SnapshotFormatError(f"parsed.{bucket} has a non-string card name")
        # bool is an int subclass
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise SnapshotFormatError(f"parsed.{bucket} counts must be non-negative integers")
        entries.append(CardEntry(name=name, count=count))
    return tuple(entries)


def deck_export_from_dict(data: Mapping[str, Any]) -> DeckExport:
    """Build a DeckExport from its JSON form. Missing buckets are empty."""
    buckets = {
        bucket.value: _card_entries(data.get(bucket.value), bucket.value) for bucket in BUCKET_ORDER
    }
    return DeckExport(**buckets)


def deck_export_to_dict(deck: DeckExport) -> dict[str, list[dict[str, Any]]]:
    return {
        bucket.value: [{"count": entry.count, "name": entry.name} for entry in deck.bucket(bucket)]
        for bucket in BUCKET_ORDER
    }


def deck_record_from_dict(data: Any) -> DeckRecord:
    """
    Build a DeckRecord from a persisted deck entry.

    Raises:
        SnapshotFormatError: If the entry is not an object or "parsed" is malformed
    """
    if not isinstance(data, Mapping):
        raise SnapshotFormatError("Encountered malformed deck entry.")

    raw_parsed = data.get("parsed")
    if raw_parsed is not None and not isinstance(raw_parsed, Mapping):
        raise SnapshotFormatError("Deck 'parsed' must be an object")

    export_text = data.get("exportText")
    return DeckRecord(
        slug=str(data.get("slug") or ""),
        label=str(data.get("label") or ""),
        url=str(data.get("url") or ""),
        export_text=str(export_text) if export_text is not None else None,
        parsed=deck_export_from_dict(raw_parsed) if raw_parsed is not None else None,
    )


def deck_record_to_dict(deck: DeckRecord) -> dict[str, Any]:
    data: dict[str, Any] = {
        "slug": deck.slug,
        "label": deck.label,
        "url": deck.url,
        "exportText": deck.export_text,
    }
    if deck.parsed is not None:
        data["parsed"] = deck_export_to_dict(deck.parsed)
    return data


def missing_card_to_dict(card: MissingCard) -> dict[str, Any]:
    return {
        "name": card.name,
        "required": card.required,
        "owned": card.owned,
        "missing": card.missing,
        "bucket": card.bucket.value,
    }


def comparison_to_dict(comparison: DeckComparison) -> dict[str, Any]:
    """Serialize a comparison in the shape the dashboard reads."""
    return {
        "deck": deck_record_to_dict(comparison.deck),
        "missingCards": [missing_card_to_dict(card) for card in comparison.missing_cards],
        "totalMissing": comparison.total_missing,
        "status": comparison.status.value,
    }


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Snapshot not found at {path}.")

    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise SnapshotFormatError(f"invalid JSON ({e.msg})", path) from e
        except UnicodeDecodeError as e:
            raise SnapshotFormatError(f"invalid JSON ({e.reason})", path) from e


def load_decks(path: Path) -> list[DeckRecord]:
    """
    Load persisted deck records.

    Raises:
        FileNotFoundError: If the file doesn't exist
        SnapshotFormatError: If the file is not a JSON array of deck objects
    """
    data = _read_json(path)
    if not isinstance(data, list):
        raise SnapshotFormatError("Deck file must contain an array.", path)

    try:
        decks = [deck_record_from_dict(entry) for entry in data]
    except SnapshotFormatError as e:
        raise SnapshotFormatError(e.reason, path) from e

    logger.info("Loaded %d deck(s) from %s", len(decks), path)
    return decks


def load_inventory(path: Path) -> Inventory:
    """
    Load an inventory snapshot in any accepted shape.

    Raises:
        FileNotFoundError: If the file doesn't exist
        SnapshotFormatError: If the file holds no card counts
        UnsupportedFormatError: If the JSON value is not an accepted shape
    """
    inventory = inventory_from_payload(_read_json(path))
    if not inventory:
        raise SnapshotFormatError("Inventory file does not contain any card counts.", path)

    logger.info("Loaded %d tracked card(s) from %s", len(inventory), path)
    return inventory


def write_comparisons(path: Path, comparisons: Iterable[DeckComparison]) -> Path:
    """Write comparison results as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [comparison_to_dict(comparison) for comparison in comparisons]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)

    logger.info("Comparison breakdown saved to %s", path)
    return path
