"""Plan-entry prefill for a chosen example photo."""
from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from ..taxonomy.catalogues import DEFAULT_TIMELINE
from .models import CandidateItem, PlanItem, SelectionCriteria
from .normalizer import display_area_names, normalize_treatment

FALLBACK_TREATMENT = "Treatment"


class PlanForm(BaseModel):
    """Inline where/when form filled in before adding to the plan."""

    where: list[str] = Field(default_factory=list)
    when: str = DEFAULT_TIMELINE
    product: str | None = None
    quantity: str | None = None
    notes: str | None = None


class PlanPrefillRequest(BaseModel):
    candidate: CandidateItem
    interest: str | None = None
    issue: str | None = None
    region: str | None = None
    form: PlanForm | None = None


class PlanPrefill(BaseModel):
    interest: str = ""
    region: str = ""
    treatment: str
    treatment_product: str | None = None
    findings: list[str] | None = None
    timeline: str | None = None
    quantity: str | None = None
    notes: str | None = None


def _strip_or_none(value: str | None) -> str | None:
    stripped = (value or "").strip()
    return stripped or None


def _raw_treatment(candidate: CandidateItem) -> str:
    tags = candidate.all_treatment_tags
    return str(tags[0]) if tags else ""


def plan_treatment(candidate: CandidateItem) -> str:
    """Normalized first tag, else the raw tag, else ``"Treatment"``."""
    raw = _raw_treatment(candidate)
    return normalize_treatment(raw) or raw or FALLBACK_TREATMENT


def plan_region(candidate: CandidateItem, criteria: SelectionCriteria) -> str:
    areas = display_area_names(candidate.area_names)
    return (areas[0] if areas else "") or (criteria.region or "").strip()


def build_plan_prefill(
    candidate: CandidateItem,
    criteria: SelectionCriteria,
    form: PlanForm | None = None,
) -> PlanPrefill:
    form = form or PlanForm()
    raw = _raw_treatment(candidate)
    treatment = plan_treatment(candidate)

    where = [w.strip() for w in form.where if w and w.strip()]
    region = ", ".join(where) if where else plan_region(candidate, criteria)

    first_specific = candidate.treatments[0].strip() if candidate.treatments else ""
    product = (
        _strip_or_none(form.product)
        or first_specific
        or (raw if raw and raw != treatment else None)
    )
    issue = (criteria.issue or "").strip()
    return PlanPrefill(
        interest=(criteria.interest or "").strip(),
        region=region,
        treatment=treatment,
        treatment_product=product or None,
        findings=[issue] if issue else None,
        timeline=form.when or DEFAULT_TIMELINE,
        quantity=_strip_or_none(form.quantity),
        notes=_strip_or_none(form.notes),
    )


def is_in_plan(
    candidate: CandidateItem,
    criteria: SelectionCriteria,
    plan_items: Sequence[PlanItem],
) -> bool:
    """True when the plan already holds this photo's treatment for the same region and interest."""
    if not plan_items:
        return False
    raw = _raw_treatment(candidate)
    treatment = (normalize_treatment(raw) or raw).strip().lower()
    region = plan_region(candidate, criteria).strip().lower()
    interest = (criteria.interest or "").strip().lower()
    for item in plan_items:
        if (item.treatment or "").strip().lower() != treatment:
            continue
        if region and (item.region or "").strip().lower() != region:
            continue
        if interest and (item.interest or "").strip().lower() != interest:
            continue
        return True
    return False
