"""
Dataset ingestion and normalization utilities for the festival dataset.

Phase 1 responsibilities:
- Read the raw festival export (JSON array or CSV) from disk.
- Normalize every row into a total-field `Festival` record.
- Drop rows that carry no identifying information.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable, List, Optional

import polars as pl
from pydantic import ValidationError

from app.core.config import settings
from app.schemas.festivals import CellValue, Festival, RawFestival


logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def _normalize_string(value: Optional[CellValue]) -> str:
    if value is None:
        return ""
    # Render cells the way the spreadsheet export does: true/false, 2025 not 2025.0.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def safe_web_url(url: str) -> str:
    """Return `url` with an explicit scheme, defaulting bare domains to https."""
    trimmed = (url or "").strip()
    if not trimmed:
        return ""
    if not _SCHEME_RE.match(trimmed):
        return f"https://{trimmed}"
    return trimmed


def display_time(value: Optional[CellValue]) -> str:
    """Render a festival's time column for display only."""
    return _normalize_string(value)


def _normalize_record(raw: RawFestival) -> Optional[Festival]:
    festival = Festival(
        country=_normalize_string(raw.country),
        name=_normalize_string(raw.name),
        place=_normalize_string(raw.place),
        time=raw.time if raw.time is not None else "",
        genre=_normalize_string(raw.genre),
        web=_normalize_string(raw.web),
    )
    # A row with only a genre and/or a time is not a usable festival.
    if not (festival.name or festival.country or festival.place or festival.web):
        return None
    return festival


def normalize_festivals(raw_records: Iterable[Any]) -> List[Festival]:
    """
    Normalize raw dataset rows into `Festival` records, preserving order.

    Rows that are not mappings, fail validation, or have no name, country,
    place or website are dropped without raising.
    """
    festivals: List[Festival] = []
    dropped = 0

    for index, row in enumerate(raw_records):
        if not isinstance(row, dict):
            dropped += 1
            continue
        try:
            raw = RawFestival.model_validate(row)
        except ValidationError as e:
            logger.debug("Dropping malformed festival row %d: %s", index, e)
            dropped += 1
            continue

        festival = _normalize_record(raw)
        if festival is None:
            dropped += 1
            continue
        festivals.append(festival)

    logger.debug("Normalized %d festivals (dropped %d)", len(festivals), dropped)
    return festivals


def read_raw_festivals(path: Path) -> List[Any]:
    """
    Read the raw festival export.

    - `.json`: a JSON array of row objects.
    - `.csv`: a spreadsheet export; every column is read as text.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Festival dataset not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array of festivals in {path}")
        return data

    if suffix == ".csv":
        # infer_schema_length=0 keeps every column as a string.
        df = pl.read_csv(path, infer_schema_length=0)
        return df.to_dicts()

    raise ValueError(f"Unsupported festival dataset format: {path.suffix}")


def load_festivals(path: Optional[Path] = None) -> List[Festival]:
    """
    Load and normalize the festival dataset.

    This is the canonical entrypoint other parts of the backend should use;
    callers own the returned list and pass it where it is needed.
    """
    dataset_path = Path(path) if path is not None else settings.FESTIVALS_DATASET_PATH
    raw_records = read_raw_festivals(dataset_path)
    festivals = normalize_festivals(raw_records)
    logger.info(
        "Loaded %d festivals from %s (%d raw rows)",
        len(festivals),
        dataset_path,
        len(raw_records),
    )
    return festivals
