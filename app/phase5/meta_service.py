from __future__ import annotations
import polars as pl
from typing import Dict, Any, Sequence

from app.schemas.festivals import Festival

_TEXT_COLUMNS = ["country", "name", "place", "genre", "web"]


def _distinct(df: pl.DataFrame, column: str) -> list[str]:
    return (
        df.filter(pl.col(column) != "")
        .select(column)
        .unique()
        .sort(column)
        .to_series()
        .to_list()
    )


def get_filter_metadata(festivals: Sequence[Festival]) -> Dict[str, Any]:
    """
    Extract unique filter values from the festival dataset.
    Genres are also grouped by country for dependent pickers.
    """
    df = pl.DataFrame(
        [f.model_dump(include=set(_TEXT_COLUMNS)) for f in festivals],
        schema={c: pl.Utf8 for c in _TEXT_COLUMNS},
    )

    countries = _distinct(df, "country")

    genres_by_country = {}
    for country in countries:
        genres_by_country[country] = _distinct(
            df.filter(pl.col("country") == country), "genre"
        )

    return {
        "countries": countries,
        "genres": _distinct(df, "genre"),
        "places": _distinct(df, "place"),
        "genres_by_country": genres_by_country,
    }
