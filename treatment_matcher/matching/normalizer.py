from __future__ import annotations

import re
from collections.abc import Iterable

from ..taxonomy.catalogues import REGION_CANONICAL
from ..taxonomy.treatments import SURGICAL_TREATMENTS
from .models import CandidateItem

# Raw category names from the photo table → canonical treatment.
TREATMENT_RENAMES: dict[str, str] = {
    "heat/energy": "Laser",
    "heat energy": "Laser",
    "oral/topical": "Skincare",
    "topical/skincare": "Skincare",
    "topical skincare": "Skincare",
    "chemical peels": "Chemical Peel",
}

EXCLUDED_TREATMENTS: frozenset[str] = frozenset(
    {"liquid rhinoplasty", "surgical", *(t.lower() for t in SURGICAL_TREATMENTS)}
)

PREFERRED_TREATMENT_ORDER: tuple[str, ...] = (
    "Skincare",
    "Laser",
    "Filler",
    "Neurotoxin",
    "Microneedling",
    "Chemical Peel",
)

_ALL_SUFFIX_RE = re.compile(r"\s*all$", re.IGNORECASE)


def normalize_treatment(raw: str) -> str:
    """Canonical treatment name, or ``""`` when the treatment is excluded."""
    trimmed = (raw or "").strip()
    lower = trimmed.lower()
    if lower in EXCLUDED_TREATMENTS:
        return ""
    return TREATMENT_RENAMES.get(lower, trimmed)


def normalized_tags(candidate: CandidateItem) -> list[str]:
    """Non-empty normalized treatment tags, general treatments first."""
    tags: list[str] = []
    for raw in candidate.all_treatment_tags:
        normalized = normalize_treatment(str(raw))
        if normalized:
            tags.append(normalized)
    return tags


def _option_sort_key(name: str) -> tuple[int, int, str]:
    if name in PREFERRED_TREATMENT_ORDER:
        return (0, PREFERRED_TREATMENT_ORDER.index(name), "")
    return (1, 0, name.casefold())


def get_treatment_options(candidates: Iterable[CandidateItem]) -> list[str]:
    """Distinct normalized treatments across candidates, preferred ones first."""
    seen: set[str] = set()
    for candidate in candidates:
        seen.update(normalized_tags(candidate))
    return sorted(seen, key=_option_sort_key)


def region_options() -> list[str]:
    return list(REGION_CANONICAL)


def _strip_all_suffix(area_name: str) -> str:
    return _ALL_SUFFIX_RE.sub("", str(area_name)).strip()


def display_area_names(area_names: Iterable[str]) -> list[str]:
    """Area names without the ``" All"`` suffix; the bare ``"All"`` sentinel is dropped."""
    names: list[str] = []
    for area in area_names:
        stripped = _strip_all_suffix(area)
        if stripped and stripped.lower() != "all":
            names.append(stripped)
    return names


def region_matches(area_names: Iterable[str], region: str | None) -> bool:
    """True when an area equals ``region`` or is the ``"All"`` sentinel; blank region matches."""
    if not region or not region.strip():
        return True
    wanted = region.strip().lower()
    for area in area_names:
        if str(area).strip().lower() == "all":
            return True
        stripped = _strip_all_suffix(area).lower()
        if stripped == "all" or stripped == wanted:
            return True
    return False
