import pytest

from riftbuilder.analysis.comparison import compare_deck
from riftbuilder.analysis.report import (
    SortOrder,
    filter_comparisons,
    format_missing_cards,
    format_report,
    sort_comparisons,
    summarize_statuses,
)
from riftbuilder.models.deck import ComparisonStatus, DeckComparison, DeckRecord


def _comparison(label: str, export_text: str, inventory: dict[str, int]) -> DeckComparison:
    deck = DeckRecord(slug=label.lower().replace(" ", "-"), label=label, export_text=export_text)
    return compare_deck(deck, inventory, max_missing=4)


@pytest.fixture
def comparisons() -> list[DeckComparison]:
    inventory = {"Card A": 3, "Card B": 1}
    return [
        _comparison("Zed Tempo", "3 Card A\n1 Card B", inventory),
        _comparison("Annie Burn", "3 Card A\n3 Card B", inventory),
        _comparison("Jinx Aggro", "9 Card C", inventory),
        _comparison("Ahri Control", "4 Card A\n2 Card B", inventory),
    ]


class TestSummarizeStatuses:
    def test_counts_each_status(self, comparisons: list[DeckComparison]) -> None:
        summary = summarize_statuses(comparisons)

        assert summary == {
            ComparisonStatus.BUILDABLE: 1,
            ComparisonStatus.CLOSE: 2,
            ComparisonStatus.UNBUILDABLE: 1,
        }

    def test_empty_has_all_keys(self) -> None:
        assert summarize_statuses([]) == {status: 0 for status in ComparisonStatus}


class TestFilterComparisons:
    def test_no_filters_keeps_everything(self, comparisons: list[DeckComparison]) -> None:
        assert filter_comparisons(comparisons) == comparisons

    def test_status_filter(self, comparisons: list[DeckComparison]) -> None:
        result = filter_comparisons(comparisons, status=ComparisonStatus.CLOSE)

        assert [c.deck.label for c in result] == ["Annie Burn", "Ahri Control"]

    def test_search_is_case_insensitive(self, comparisons: list[DeckComparison]) -> None:
        result = filter_comparisons(comparisons, search="  JINX ")

        assert [c.deck.label for c in result] == ["Jinx Aggro"]

    def test_status_and_search_combined(self, comparisons: list[DeckComparison]) -> None:
        result = filter_comparisons(comparisons, status=ComparisonStatus.CLOSE, search="ahri")

        assert [c.deck.label for c in result] == ["Ahri Control"]


    def test_unlabeled_deck_found_by_slug(self) -> None:
        deck = DeckRecord(slug="void-control", export_text="1 Card A")
        comparison = compare_deck(deck, {}, max_missing=4)

        assert filter_comparisons([comparison], search="VOID") == [comparison]


class TestSortComparisons:
    def test_default_keeps_input_order(self, comparisons: list[DeckComparison]) -> None:
        assert sort_comparisons(comparisons) == comparisons

    def test_missing_ascending_ties_by_label(self, comparisons: list[DeckComparison]) -> None:
        result = sort_comparisons(comparisons, SortOrder.MISSING_ASC)

        assert [c.deck.label for c in result] == [
            "Zed Tempo",
            "Ahri Control",
            "Annie Burn",
            "Jinx Aggro",
        ]

    def test_missing_descending(self, comparisons: list[DeckComparison]) -> None:
        result = sort_comparisons(comparisons, SortOrder.MISSING_DESC)

        assert [c.deck.label for c in result] == [
            "Jinx Aggro",
            "Ahri Control",
            "Annie Burn",
            "Zed Tempo",
        ]

    def test_does_not_mutate_input(self, comparisons: list[DeckComparison]) -> None:
        original = list(comparisons)

        sort_comparisons(comparisons, SortOrder.MISSING_DESC)

        assert comparisons == original


class TestFormatMissingCards:
    def test_groups_by_bucket(self) -> None:
        comparison = _comparison(
            "Deck",
            "2 Card A\n1 Card B\n1 Void Gate\n6 Fury Rune\nSideboard\n2 Card C",
            {"Card A": 1},
        )

        assert format_missing_cards(comparison) == (
            "1 Card A\n1 Card B\n\n1 Void Gate\n\n6 Fury Rune\n\n2 Card C"
        )

    def test_buildable_deck_is_empty(self) -> None:
        comparison = _comparison("Deck", "1 Card A", {"Card A": 1})

        assert format_missing_cards(comparison) == ""


class TestFormatReport:
    def test_report_sections(self, comparisons: list[DeckComparison]) -> None:
        report = format_report(
            comparisons,
            decks_source="decks.json",
            inventory_source="inventory.json",
            inventory_size=2,
            max_missing=4,
        )

        assert report.startswith("=== Deck Comparison Report ===")
        assert "Deck source: decks.json (4 deck(s))" in report
        assert "Inventory: inventory.json (2 tracked card(s))" in report
        assert "- Zed Tempo [BUILDABLE] — complete" in report
        assert "    • All requirements satisfied." in report
        assert "- Jinx Aggro [UNBUILDABLE] — 9 missing" in report
        assert "    • Card C: need 9 more (have 0/9)" in report
        assert "  Close (<=4 missing): 2" in report

    def test_preview_is_truncated(self) -> None:
        text = "\n".join(f"1 Card {i}" for i in range(10))
        comparison = _comparison("Big Deck", text, {})

        report = format_report(
            [comparison],
            decks_source="d",
            inventory_source="i",
            inventory_size=0,
            max_missing=4,
        )

        assert "Card 7: need 1 more" in report
        assert "Card 8: need 1 more" not in report
        assert "    • …and 2 more card(s)" in report
