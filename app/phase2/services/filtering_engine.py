from __future__ import annotations

from typing import Sequence

from app.schemas.festivals import Festival, SearchCriteria


def _normalize_query(value: str) -> str:
    return (value or "").strip().lower()


def _contains(field: str, needle: str) -> bool:
    return needle in field.strip().lower()


def search_festivals(
    festivals: Sequence[Festival],
    criteria: SearchCriteria,
) -> list[Festival]:
    """
    Apply the search criteria to the festival list.

    Filters (each case-insensitive substring containment, ANDed):
    - name
    - country
    - genre
    - place

    Empty criteria impose no constraint. If every criterion is empty the
    result is empty: no search was requested, which callers report
    differently from "zero matches". Input order is preserved.
    """
    if criteria.is_empty():
        return []

    n = _normalize_query(criteria.name_query)
    c = _normalize_query(criteria.country_query)
    g = _normalize_query(criteria.genre_query)
    p = _normalize_query(criteria.place_query)

    matches = []
    for festival in festivals:
        if n and not _contains(festival.name, n):
            continue
        if c and not _contains(festival.country, c):
            continue
        if g and not _contains(festival.genre, g):
            continue
        if p and not _contains(festival.place, p):
            continue
        matches.append(festival)

    return matches
