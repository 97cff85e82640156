from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from ..matching.cache import clear_cache
from ..matching.models import CandidateItem
from .adapter import candidates_from_records
from .config import DEFAULT_RECORD_STORE_CONFIG, RecordStoreConfig

logger = logging.getLogger(__name__)

# Columns exported as separator-joined lists.
LIST_COLUMNS = ("Name (from Treatments)", "Name (from General Treatments)")
ATTACHMENT_COLUMN = "Photo"

_df: pd.DataFrame | None = None
_candidates: list[CandidateItem] | None = None


class RecordStoreError(RuntimeError):
    """The photo table export could not be read."""


def _load(path: Path) -> pd.DataFrame:
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise RecordStoreError(f"Cannot read photo export {path}: {exc}") from exc
    if "id" not in df.columns:
        raise RecordStoreError(f"Photo export {path} has no 'id' column")
    return df


def _parse_attachments(value: str) -> Any:
    if not value:
        return None
    if value.lstrip().startswith("["):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            logger.warning("Skipping unparsable attachment payload: %r", value[:80])
            return None
    # A bare URL stands in for a single attachment without thumbnails.
    return [{"url": value.strip()}]


def _row_to_record(row: pd.Series, config: RecordStoreConfig) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for column, value in row.items():
        if column == "id" or value == "":
            continue
        if column in LIST_COLUMNS:
            fields[column] = [v.strip() for v in value.split(config.list_separator) if v.strip()]
        elif column == ATTACHMENT_COLUMN:
            fields[column] = _parse_attachments(value)
        else:
            fields[column] = value
    return {"id": row["id"], "fields": fields}


def get_dataframe(config: RecordStoreConfig = DEFAULT_RECORD_STORE_CONFIG) -> pd.DataFrame:
    """Return the in-memory photo table, loading it on first call."""
    global _df
    if _df is None:
        _df = _load(config.photos_csv).head(config.max_records)
        logger.info("Loaded %d photo records from %s", len(_df), config.photos_csv)
    return _df


def get_records(config: RecordStoreConfig = DEFAULT_RECORD_STORE_CONFIG) -> list[dict[str, Any]]:
    df = get_dataframe(config)
    return [_row_to_record(row, config) for _, row in df.iterrows()]


def get_candidates(config: RecordStoreConfig = DEFAULT_RECORD_STORE_CONFIG) -> list[CandidateItem]:
    """Browsable candidate photos from the export, adapted once and reused."""
    global _candidates
    if _candidates is None:
        _candidates = candidates_from_records(get_records(config))
    return _candidates


def reset() -> None:
    """Drop the loaded table and any match responses computed from it."""
    global _df, _candidates
    _df = None
    _candidates = None
    clear_cache()
