from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import Select, or_, select
from sqlalchemy.orm import Session

from app.phase3.database import art_forms, festival_genres, festivals, genres
from app.schemas.festivals import FestivalQueryParams


logger = logging.getLogger(__name__)

LIKE_ESCAPE = "/"


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def contains_pattern(value: str) -> str:
    """Build a `%value%` pattern that matches `value` literally."""
    escaped = (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


def base_festivals_query() -> Select:
    """
    Festival rows with their art form name, joined to genres for filtering.

    DISTINCT collapses the one-row-per-genre fan-out of the genre join;
    the art form join is many-to-one and never multiplies rows.
    """
    joined = (
        festivals.outerjoin(art_forms, festivals.c.art_form_id == art_forms.c.id)
        .outerjoin(festival_genres, festivals.c.id == festival_genres.c.festival_id)
        .outerjoin(genres, festival_genres.c.genre_id == genres.c.id)
    )
    return (
        select(festivals, art_forms.c.name.label("art_form"))
        .select_from(joined)
        .distinct()
    )


def build_festivals_query(params: FestivalQueryParams) -> Select:
    """
    Translate the query-string filters into a parameterized SELECT.

    Filters (ILIKE partial matches, ANDed):
    - country  -> festivals.country
    - genre    -> genres.name
    - art_form -> art_forms.name
    - search   -> festivals.name OR festivals.city
    """
    query = base_festivals_query()

    country = _clean(params.country)
    if country:
        query = query.where(
            festivals.c.country.ilike(contains_pattern(country), escape=LIKE_ESCAPE)
        )

    genre = _clean(params.genre)
    if genre:
        query = query.where(
            genres.c.name.ilike(contains_pattern(genre), escape=LIKE_ESCAPE)
        )

    art_form = _clean(params.art_form)
    if art_form:
        query = query.where(
            art_forms.c.name.ilike(contains_pattern(art_form), escape=LIKE_ESCAPE)
        )

    search = _clean(params.search)
    if search:
        pattern = contains_pattern(search)
        query = query.where(
            or_(
                festivals.c.name.ilike(pattern, escape=LIKE_ESCAPE),
                festivals.c.city.ilike(pattern, escape=LIKE_ESCAPE),
            )
        )

    return query


def fetch_festivals(session: Session, params: FestivalQueryParams) -> List[Dict[str, Any]]:
    """Run the festival query on `session` and return flattened rows."""
    query = build_festivals_query(params)
    rows = session.execute(query).mappings().all()
    logger.debug("Festival query returned %d rows", len(rows))
    return [dict(row) for row in rows]
