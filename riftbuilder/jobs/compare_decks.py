"""
Compare scraped decks against an inventory snapshot.

Loads the deck and inventory snapshot files, classifies every deck and
prints a plain-text report. Optionally writes the full comparison
breakdown as JSON for the dashboard.

Usage:
    python -m riftbuilder.jobs.compare_decks --decks data/most-viewed.json \
        --inventory data/sample-inventory.json --max-missing 4 --json out.json
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from riftbuilder.analysis.comparison import compare_decks
from riftbuilder.analysis.report import format_report
from riftbuilder.config import settings
from riftbuilder.models.deck import DeckComparison
from riftbuilder.models.errors import RiftBuilderError
from riftbuilder.storage.snapshots import load_decks, load_inventory, write_comparisons

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare scraped decks against your inventory")
    parser.add_argument(
        "--decks",
        type=Path,
        default=settings.decks_path,
        help=f"Deck snapshot file (default: {settings.decks_path})",
    )
    parser.add_argument(
        "--inventory",
        type=Path,
        default=settings.inventory_path,
        help=f"Inventory snapshot file (default: {settings.inventory_path})",
    )
    parser.add_argument(
        "--max-missing",
        type=int,
        default=settings.max_missing,
        help=f"Total missing copies still counted as close (default: {settings.max_missing})",
    )
    parser.add_argument(
        "--json",
        dest="json_output",
        type=Path,
        default=settings.comparison_output_path,
        help="Also write the comparison breakdown to this JSON file",
    )
    return parser


def run_comparison(
    decks_path: Path,
    inventory_path: Path,
    max_missing: int,
    json_output: Path | None = None,
) -> list[DeckComparison]:
    """
    Load snapshots, compare every deck and print the report.

    Returns:
        Comparison results in deck-file order (empty if the deck file is empty)
    """
    inventory = load_inventory(inventory_path)
    decks = load_decks(decks_path)

    if not decks:
        logger.warning("No decks found in %s. Run the deck scraper first.", decks_path)
        return []

    results = compare_decks(decks, inventory, max_missing)

    if json_output is not None:
        write_comparisons(json_output, results)

    print(
        format_report(
            results,
            decks_source=str(decks_path),
            inventory_source=str(inventory_path),
            inventory_size=len(inventory),
            max_missing=max_missing,
        )
    )
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for the deck comparison report."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        run_comparison(
            decks_path=args.decks,
            inventory_path=args.inventory,
            max_missing=max(0, args.max_missing),
            json_output=args.json_output,
        )
    except (FileNotFoundError, RiftBuilderError) as e:
        logger.error("Comparison failed: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
