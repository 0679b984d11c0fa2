"""
Error taxonomy for deck parsing, inventory normalization and comparison.

Every error is surfaced to the caller of the operation that raised it.
Nothing in the core catches these; the API and CLI layers translate them.
"""

from pathlib import Path


class RiftBuilderError(Exception):
    """Base class for all RiftBuilder errors."""


class ParseError(RiftBuilderError):
    """
    Raised when a deck export line does not match "<count> <name>".

    A single bad line aborts the whole parse; no partial deck is returned.
    """

    def __init__(self, line_number: int, line_content: str, reason: str) -> None:
        self.line_number = line_number
        self.line_content = line_content
        self.reason = reason
        super().__init__(f"Unable to parse export line {line_number} ({line_content!r}): {reason}")


class UnsupportedFormatError(RiftBuilderError):
    """Raised when an inventory payload has none of the accepted shapes."""

    def __init__(self, received_type: str) -> None:
        self.received_type = received_type
        super().__init__(
            f"Unsupported inventory format ({received_type}). "
            "Use an object map or an array of { name, count } entries."
        )


class MissingDataError(RiftBuilderError):
    """Raised when a deck record has neither parsed data nor export text."""

    def __init__(self, deck_label: str) -> None:
        self.deck_label = deck_label
        super().__init__(f"Deck {deck_label} is missing both parsed data and exportText.")


class SnapshotFormatError(RiftBuilderError):
    """Raised when a JSON snapshot file has an unexpected structure."""

    def __init__(self, reason: str, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self.reason = reason
        super().__init__(f"{self.path}: {reason}" if self.path else reason)
