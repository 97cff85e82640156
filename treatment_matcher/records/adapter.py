"""Raw photo-table records → ``CandidateItem``.

Every field is optional in the source table; absent values become empty strings,
empty tuples or ``None``. Nested attachment payloads that do not have the expected
shape are skipped with a warning.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..matching.models import CandidateItem

logger = logging.getLogger(__name__)

SURGICAL_MARKER = "Surgical"


def _thumbnail_url(thumbnails: Any, size: str) -> str:
    if not isinstance(thumbnails, Mapping):
        return ""
    entry = thumbnails.get(size)
    if entry is None:
        return ""
    if not isinstance(entry, Mapping):
        logger.warning("Skipping malformed %r thumbnail: %r", size, entry)
        return ""
    return str(entry.get("url") or "")


def resolve_photo_urls(attachments: Any) -> tuple[str, str]:
    """
    ``(photo_url, thumbnail_url)`` for the first attachment.

    The photo prefers the full thumbnail, then large, then the attachment url. The
    thumbnail prefers large, then small, then the attachment url.
    """
    if not attachments:
        return "", ""
    if not isinstance(attachments, list) or not isinstance(attachments[0], Mapping):
        logger.warning("Skipping malformed photo attachment: %r", attachments)
        return "", ""
    attachment = attachments[0]
    thumbnails = attachment.get("thumbnails")
    if thumbnails is not None and not isinstance(thumbnails, Mapping):
        logger.warning("Skipping malformed thumbnails: %r", thumbnails)
        thumbnails = None
    url = str(attachment.get("url") or "")
    photo_url = _thumbnail_url(thumbnails, "full") or _thumbnail_url(thumbnails, "large") or url
    thumbnail_url = _thumbnail_url(thumbnails, "large") or _thumbnail_url(thumbnails, "small") or url
    return photo_url, thumbnail_url


def _tag_list(fields: Mapping[str, Any], list_field: str, single_field: str) -> tuple[str, ...]:
    value = fields.get(list_field)
    if isinstance(value, list):
        return tuple(str(v) for v in value)
    single = fields.get(single_field)
    return (str(single),) if single else ()


def _area_names(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, list):
        parts = [str(v) for v in value]
    else:
        parts = str(value).split(",")
    return tuple(p.strip() for p in parts if p.strip())


def _text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    if isinstance(value, list):
        # Lookup fields arrive as single-element lists.
        return ", ".join(str(v) for v in value) or None
    return str(value)


def record_to_candidate(record: Mapping[str, Any]) -> CandidateItem:
    fields = record.get("fields") or {}
    photo_url, thumbnail_url = resolve_photo_urls(fields.get("Photo"))
    return CandidateItem(
        id=str(record.get("id") or ""),
        name=str(fields.get("Name") or ""),
        photo_url=photo_url,
        thumbnail_url=thumbnail_url,
        treatments=_tag_list(fields, "Name (from Treatments)", "Treatments"),
        general_treatments=_tag_list(fields, "Name (from General Treatments)", "General Treatments"),
        area_names=_area_names(fields.get("Area Names")),
        surgical=_text(fields.get("Surgical (from General Treatments)")),
        caption=_text(fields.get("Caption")),
        story_title=_text(fields.get("Story Title")),
        story_detailed=_text(fields.get("Story Detailed")),
        longevity=_text(fields.get("Longevity (from General Treatments)")),
        downtime=_text(fields.get("Downtime (from General Treatments)")),
        price_range=_text(fields.get("Price Range (from General Treatments)")),
        age=_text(fields.get("Age")),
        skin_tone=_text(fields.get("Skin Tone")),
        ethnic_background=_text(fields.get("Ethnic Background")),
        skin_type=_text(fields.get("Skin Type")),
    )


def candidates_from_records(records: Iterable[Mapping[str, Any]]) -> list[CandidateItem]:
    """Browsable photos: those with an image that are not surgical examples."""
    candidates: list[CandidateItem] = []
    for record in records:
        candidate = record_to_candidate(record)
        if not candidate.photo_url or candidate.surgical == SURGICAL_MARKER:
            continue
        candidates.append(candidate)
    return candidates
