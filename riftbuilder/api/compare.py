"""
Comparison API endpoints.

Serves deck comparisons to the dashboard, either for decks and an
inventory posted in the request or for the configured snapshot files.
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field

from riftbuilder.analysis.comparison import DEFAULT_MAX_MISSING, compare_decks
from riftbuilder.analysis.report import (
    SortOrder,
    filter_comparisons,
    sort_comparisons,
    summarize_statuses,
)
from riftbuilder.config import settings
from riftbuilder.models.deck import ComparisonStatus, DeckComparison
from riftbuilder.models.errors import RiftBuilderError
from riftbuilder.parsers.inventory import normalize_inventory
from riftbuilder.storage.snapshots import (
    comparison_to_dict,
    deck_record_from_dict,
    load_decks,
    load_inventory,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["compare"])


class CompareRequest(BaseModel):
    """Decks and inventory to compare, as the scrapers write them."""

    model_config = ConfigDict(populate_by_name=True)

    decks: list[dict[str, Any]] = Field(default_factory=list)
    inventory: Any = Field(default_factory=dict)
    max_missing: int = Field(default=DEFAULT_MAX_MISSING, alias="maxMissing")


class CompareResponse(BaseModel):
    """Comparison results plus a per-status count."""

    comparisons: list[dict[str, Any]]
    summary: dict[str, int]


def _build_response(
    comparisons: list[DeckComparison],
    summary_source: list[DeckComparison],
) -> CompareResponse:
    return CompareResponse(
        comparisons=[comparison_to_dict(comparison) for comparison in comparisons],
        summary={
            status_.value: count for status_, count in summarize_statuses(summary_source).items()
        },
    )


def _bad_request(error: RiftBuilderError) -> HTTPException:
    logger.warning("Comparison rejected: %s", error)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


@router.post("/compare", response_model=CompareResponse)
async def compare(request: CompareRequest) -> CompareResponse:
    """
    Compare posted decks against a posted inventory.

    Any malformed deck or inventory rejects the whole request.
    """
    try:
        inventory = normalize_inventory(request.inventory)
        decks = [deck_record_from_dict(entry) for entry in request.decks]
        comparisons = compare_decks(decks, inventory, request.max_missing)
    except RiftBuilderError as e:
        raise _bad_request(e) from e

    return _build_response(comparisons, comparisons)


@router.get("/comparisons", response_model=CompareResponse)
async def list_comparisons(
    max_missing: int | None = None,
    status_filter: Annotated[ComparisonStatus | None, Query(alias="status")] = None,
    search: str = "",
    sort: SortOrder = SortOrder.DEFAULT,
) -> CompareResponse:
    """
    Compare the configured deck snapshot against the configured inventory.

    The summary always counts every deck; filtering and sorting only
    affect the returned list.
    """
    threshold = settings.max_missing if max_missing is None else max_missing

    try:
        decks = load_decks(settings.decks_path)
        inventory = load_inventory(settings.inventory_path)
        comparisons = compare_decks(decks, inventory, threshold)
    except FileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except RiftBuilderError as e:
        raise _bad_request(e) from e

    visible = sort_comparisons(filter_comparisons(comparisons, status_filter, search), sort)
    return _build_response(visible, comparisons)
