"""
Client-facing search states.

The search screen shows one of four states:
- featured:   nothing searched yet, show the first few festivals
- no_filters: search pressed with every field empty, prompt for a filter
- no_results: at least one filter, nothing matched
- results:    at least one filter, matches plus a count
"""

from __future__ import annotations

from typing import Optional, Sequence

from app.phase1.dataset_loader import display_time, safe_web_url
from app.phase2.services.filtering_engine import search_festivals
from app.schemas.festivals import (
    Festival,
    FestivalOut,
    SearchCriteria,
    SearchMeta,
    SearchResponse,
    SearchState,
)

NO_FILTERS_MESSAGE = "Select at least one filter to search festivals."
NO_RESULTS_MESSAGE = "No festivals match your filters."


def to_festival_out(festival: Festival) -> FestivalOut:
    return FestivalOut(
        **festival.model_dump(),
        website_url=safe_web_url(festival.web),
        display_time=display_time(festival.time),
    )


def build_search_view(
    festivals: Sequence[Festival],
    criteria: Optional[SearchCriteria],
    has_searched: bool,
    featured_count: int = 8,
) -> SearchResponse:
    if not has_searched:
        featured = [to_festival_out(f) for f in festivals[:featured_count]]
        return SearchResponse(
            query=criteria,
            meta=SearchMeta(
                state=SearchState.FEATURED,
                total_matches=0,
                returned=len(featured),
            ),
            festivals=featured,
        )

    if criteria is None or criteria.is_empty():
        return SearchResponse(
            query=criteria,
            meta=SearchMeta(state=SearchState.NO_FILTERS, message=NO_FILTERS_MESSAGE),
        )

    matches = search_festivals(festivals, criteria)
    if not matches:
        return SearchResponse(
            query=criteria,
            meta=SearchMeta(state=SearchState.NO_RESULTS, message=NO_RESULTS_MESSAGE),
        )

    return SearchResponse(
        query=criteria,
        meta=SearchMeta(
            state=SearchState.RESULTS,
            total_matches=len(matches),
            returned=len(matches),
        ),
        festivals=[to_festival_out(f) for f in matches],
    )
