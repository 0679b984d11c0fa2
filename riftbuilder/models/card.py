from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CardEntry:
    """
    One line of a deck list.

    Attributes:
        name: Card display name as printed by the export
        count: Number of copies the deck requires
    """

    name: str
    count: int


@dataclass(frozen=True, slots=True)
class InventoryCard:
    """
    One scraped inventory row (a single printing/finish/condition of a card).

    Several rows may share a name; counts are summed when the inventory
    is normalized.
    """

    name: str
    count: int
    condition: str | None = None
    finish: str | None = None
    set_name: str | None = None
    collector_number: str | None = None
    price_usd: float | None = None
    price_text: str | None = None
    image_url: str | None = None
    page: int | None = None
