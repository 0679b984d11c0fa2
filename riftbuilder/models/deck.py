from dataclasses import dataclass, replace
from enum import Enum

from riftbuilder.models.card import CardEntry

# Owned copies per card name, summed across finishes and conditions
Inventory = dict[str, int]


class DeckBucket(str, Enum):
    """The four card-list partitions of a deck."""

    MAIN = "main"
    BATTLEFIELDS = "battlefields"
    RUNES = "runes"
    SIDEBOARD = "sideboard"


# Reporting and export features rely on this order
BUCKET_ORDER: tuple[DeckBucket, ...] = (
    DeckBucket.MAIN,
    DeckBucket.BATTLEFIELDS,
    DeckBucket.RUNES,
    DeckBucket.SIDEBOARD,
)


class ComparisonStatus(str, Enum):
    """How close an inventory is to completing a deck."""

    BUILDABLE = "buildable"
    CLOSE = "close"
    UNBUILDABLE = "unbuildable"


@dataclass(frozen=True)
class DeckExport:
    """
    A parsed deck list, split into buckets.

    Every entry from the source export text lives in exactly one bucket.
    Within a bucket, entries keep their source order.
    """

    main: tuple[CardEntry, ...] = ()
    battlefields: tuple[CardEntry, ...] = ()
    runes: tuple[CardEntry, ...] = ()
    sideboard: tuple[CardEntry, ...] = ()

    def bucket(self, bucket: DeckBucket) -> tuple[CardEntry, ...]:
        """Entries for a single bucket."""
        return getattr(self, bucket.value)

    def total_cards(self) -> int:
        """Total copies across all buckets."""
        return sum(entry.count for bucket in BUCKET_ORDER for entry in self.bucket(bucket))


@dataclass(frozen=True)
class DeckRecord:
    """
    A scraped deck as persisted in the deck snapshot file.

    Attributes:
        slug: Deck identifier on the source site
        label: Human-readable deck name
        url: Deck page URL
        export_text: Raw "Export as Text" payload
        parsed: Structured deck, when already parsed
    """

    slug: str
    label: str = ""
    url: str = ""
    export_text: str | None = None
    parsed: DeckExport | None = None

    @property
    def display_name(self) -> str:
        return self.label or self.slug

    def with_parsed(self, parsed: DeckExport) -> "DeckRecord":
        return replace(self, parsed=parsed)


@dataclass(frozen=True)
class MissingCard:
    """A deck requirement the inventory cannot cover."""

    name: str
    required: int
    owned: int
    missing: int
    bucket: DeckBucket


@dataclass(frozen=True)
class DeckComparison:
    """
    Result of comparing one deck against an inventory.

    The deck always carries its parsed structure. ``missing_cards`` is
    ordered by bucket (main, battlefields, runes, sideboard), then by
    source order within each bucket.
    """

    deck: DeckRecord
    missing_cards: tuple[MissingCard, ...] = ()
    total_missing: int = 0
    status: ComparisonStatus = ComparisonStatus.BUILDABLE

    @property
    def is_buildable(self) -> bool:
        return self.status is ComparisonStatus.BUILDABLE
