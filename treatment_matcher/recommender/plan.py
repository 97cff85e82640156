"""Helpers for plan entries: quantity units, same-day filtering and display areas."""
from __future__ import annotations

from collections.abc import Iterable

from ..matching.models import PlanItem
from ..taxonomy.treatments import (
    QUANTITY_OPTIONS_FILLER,
    QUANTITY_OPTIONS_TOX,
    QUANTITY_QUICK_OPTIONS_DEFAULT,
    SAME_DAY_TREATMENTS,
)
from .models import QuantityContext

_FILLER_EXACT = ("filler", "hyaluronic acid", "ha")
_TOX_EXACT = ("neurotoxin", "tox", "botox", "dysport", "xeomin")
_ENERGY_EXACT = ("laser", "rf", "radiofrequency", "microneedling")


def quantity_context(treatment: str | None) -> QuantityContext:
    """Unit label and quick-pick options for a treatment's quantity field."""
    t = (treatment or "").strip().lower()
    if not t:
        return QuantityContext(unit_label="Quantity", options=list(QUANTITY_QUICK_OPTIONS_DEFAULT))
    if t in _FILLER_EXACT or "filler" in t:
        return QuantityContext(unit_label="Syringes", options=list(QUANTITY_OPTIONS_FILLER))
    if t in _TOX_EXACT or "neurotoxin" in t or "tox" in t:
        return QuantityContext(unit_label="Units", options=list(QUANTITY_OPTIONS_TOX))
    if t in _ENERGY_EXACT or any(k in t for k in ("laser", "radiofrequency", "microneedling")):
        return QuantityContext(unit_label="Sessions", options=list(QUANTITY_QUICK_OPTIONS_DEFAULT))
    return QuantityContext(unit_label="Quantity", options=list(QUANTITY_QUICK_OPTIONS_DEFAULT))


def filter_treatments_by_same_day(treatment_names: Iterable[str], same_day: bool) -> list[str]:
    names = list(treatment_names)
    if not same_day:
        return names
    return [t for t in names if t in SAME_DAY_TREATMENTS]


def display_area_for_text(text: str | None) -> str | None:
    """Single display area for free region, interest or finding text."""
    if not text or not text.strip():
        return None
    lower = text.strip().lower()
    if "forehead" in lower:
        return "Forehead"
    if "under eye" in lower or "tear trough" in lower or ("eye" in lower and "eyebrow" not in lower):
        return "Eyes"
    if "eyelid" in lower or "crow" in lower or "bunny" in lower:
        return "Eyes"
    if "nose" in lower or "nasal" in lower:
        return "Nose"
    if "cheek" in lower:
        return "Cheeks"
    if "lip" in lower:
        return "Lips"
    if "chin" in lower:
        return "Chin"
    if "jaw" in lower or "jowl" in lower:
        return "Jawline"
    if "neck" in lower or "platysma" in lower:
        return "Neck"
    if "full face" in lower:
        return "Full face"
    if "skin" in lower:
        return "Skin"
    return None


def display_area_for_item(item: PlanItem) -> str | None:
    """Region first, then interest, then the first finding that names an area."""
    area = display_area_for_text(item.region) or display_area_for_text(item.interest)
    if area:
        return area
    for finding in item.findings or ():
        area = display_area_for_text(finding)
        if area:
            return area
    return None
