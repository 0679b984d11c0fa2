import json
from pathlib import Path

import pytest

from riftbuilder.models.deck import DeckRecord


@pytest.fixture
def sample_export_text() -> str:
    """Export text with a blank line and a sideboard header."""
    return "3 Acceptable Losses\n2 Fleeting Thought\n\nSideboard:\n1 Acceptable Losses"


@pytest.fixture
def full_export_text() -> str:
    """Export text touching every bucket."""
    return """1 Jinx, Loose Cannon
3 Acceptable Losses
2 Fleeting Thought

1 Zaun Warrens
1 Void Gate

6 Fury Rune
6 Chaos Rune

Sideboard
2 Fleeting Thought
1 Hallowed Tomb"""


@pytest.fixture
def sample_deck(sample_export_text: str) -> DeckRecord:
    return DeckRecord(
        slug="jinx-aggro",
        label="Jinx Aggro",
        url="https://piltoverarchive.com/decks/view/jinx-aggro",
        export_text=sample_export_text,
    )


@pytest.fixture
def deck_snapshot(tmp_path: Path, sample_export_text: str) -> Path:
    """Deck snapshot file as written by the deck scraper."""
    path = tmp_path / "decks.json"
    path.write_text(
        json.dumps(
            [
                {
                    "slug": "jinx-aggro",
                    "label": "Jinx Aggro",
                    "url": "https://piltoverarchive.com/decks/view/jinx-aggro",
                    "exportText": sample_export_text,
                },
                {
                    "slug": "void-control",
                    "label": "Void Control",
                    "url": "https://piltoverarchive.com/decks/view/void-control",
                    "exportText": "2 Fleeting Thought\n1 Void Gate",
                },
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def inventory_snapshot(tmp_path: Path) -> Path:
    """Inventory snapshot file as written by the inventory scraper."""
    path = tmp_path / "inventory.json"
    path.write_text(
        json.dumps(
            {
                "user": "rifter",
                "cards": [
                    {"name": "Acceptable Losses", "count": 1, "finish": "Foil"},
                    {"name": "Acceptable Losses", "count": 1, "finish": "Normal"},
                    {"name": "Fleeting Thought", "count": 2},
                    {"name": "Void Gate", "count": 1},
                ],
                "counts": {"Acceptable Losses": 2, "Fleeting Thought": 2, "Void Gate": 1},
            }
        ),
        encoding="utf-8",
    )
    return path
