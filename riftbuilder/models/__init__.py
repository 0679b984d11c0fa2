from riftbuilder.models.card import CardEntry, InventoryCard
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
from riftbuilder.models.errors import (
    MissingDataError,
    ParseError,
    RiftBuilderError,
    SnapshotFormatError,
    UnsupportedFormatError,
)

__all__ = [
    "BUCKET_ORDER",
    "CardEntry",
    "ComparisonStatus",
    "DeckBucket",
    "DeckComparison",
    "DeckExport",
    "DeckRecord",
    "Inventory",
    "InventoryCard",
    "MissingCard",
    "MissingDataError",
    "ParseError",
    "RiftBuilderError",
    "SnapshotFormatError",
    "UnsupportedFormatError",
]
