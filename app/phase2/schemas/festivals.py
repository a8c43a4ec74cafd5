from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# Spreadsheet cells come through as text, numbers or booleans.
# bool comes first so True is not coerced to 1.
CellValue = Union[bool, str, int, float]


class RawFestival(BaseModel):
    """
    One row of the raw festival dataset as exported from the spreadsheet.

    Every column is optional. Upper-case header names are the canonical
    keys; lower-case names are accepted too.
    """

    model_config = ConfigDict(extra="ignore")

    country: Optional[CellValue] = Field(
        default=None, validation_alias=AliasChoices("COUNTRY", "country")
    )
    name: Optional[CellValue] = Field(
        default=None, validation_alias=AliasChoices("NAME", "name")
    )
    place: Optional[CellValue] = Field(
        default=None, validation_alias=AliasChoices("PLACE", "place")
    )
    time: Optional[CellValue] = Field(
        default=None, validation_alias=AliasChoices("TIME", "time")
    )
    genre: Optional[CellValue] = Field(
        default=None, validation_alias=AliasChoices("ART/GENRE", "genre")
    )
    web: Optional[CellValue] = Field(
        default=None, validation_alias=AliasChoices("WEB", "web")
    )


class Festival(BaseModel):
    """Normalized festival record: every field present, text fields trimmed."""

    model_config = ConfigDict(frozen=True)

    country: str = ""
    name: str = ""
    place: str = Field(default="", description="City or venue.")
    time: CellValue = Field(
        default="", description="Passed through verbatim from the dataset."
    )
    genre: str = Field(default="", description="The ART/GENRE column.")
    web: str = Field(default="", description="URL or bare domain.")


class FestivalOut(Festival):
    website_url: str = Field(
        default="", description="Website with an explicit scheme, '' if none."
    )
    display_time: str = ""


class SearchCriteria(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name_query: str = Field(default="", description="Substring of the festival name.")
    country_query: str = Field(default="", description="Substring of the country.")
    genre_query: str = Field(default="", description="Substring of the art/genre.")
    place_query: str = Field(default="", description="Substring of the city or venue.")

    @field_validator(
        "name_query", "country_query", "genre_query", "place_query", mode="before"
    )
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v

    def is_empty(self) -> bool:
        """True when no criterion has any non-whitespace content."""
        return not any(
            q.strip()
            for q in (
                self.name_query,
                self.country_query,
                self.genre_query,
                self.place_query,
            )
        )


class SearchState(str, Enum):
    FEATURED = "featured"
    NO_FILTERS = "no_filters"
    NO_RESULTS = "no_results"
    RESULTS = "results"


class SearchMeta(BaseModel):
    state: SearchState
    total_matches: int = 0
    returned: int = 0
    message: Optional[str] = None


class SearchResponse(BaseModel):
    query: Optional[SearchCriteria] = None
    meta: SearchMeta
    festivals: List[FestivalOut] = Field(default_factory=list)


class FestivalQueryParams(BaseModel):
    """Query-string filters accepted by GET /api/festivals."""

    country: Optional[str] = Field(default=None, description="Partial country match.")
    genre: Optional[str] = Field(default=None, description="Partial genre name match.")
    art_form: Optional[str] = Field(
        default=None, description="Partial art form name match."
    )
    search: Optional[str] = Field(
        default=None, description="Partial match against festival name or city."
    )
