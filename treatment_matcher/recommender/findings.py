"""Finding-driven recommendations: goal, region and treatments for assessment findings."""
from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..taxonomy import DEFAULT_REGISTRY, TaxonomyRegistry
from ..taxonomy.catalogues import (
    ASSESSMENT_FINDINGS,
    ASSESSMENT_FINDINGS_BY_AREA,
    GENERAL_CONCERN_TO_FINDINGS,
    OTHER_FINDING_LABEL,
)
from ..taxonomy.models import FindingRecommendation
from .models import AreaFindings, SuggestedTreatment

HERE_FOR_TREATMENT: dict[str, str] = {"Tox": "Neurotoxin", "Filler": "Filler"}


def goal_region_treatments_for_finding(
    finding: str | None,
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> FindingRecommendation | None:
    """First finding row whose keyword occurs in ``finding``; ``None`` for blank or "Other finding"."""
    if not finding or not finding.strip() or finding == OTHER_FINDING_LABEL:
        return None
    return registry.finding_recommendation(finding)


def suggested_treatments_for_findings(
    findings: Iterable[str],
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> list[SuggestedTreatment]:
    seen: set[tuple[str, str, str]] = set()
    suggested: list[SuggestedTreatment] = []
    for finding in findings:
        mapped = goal_region_treatments_for_finding(finding, registry)
        if mapped is None:
            continue
        for treatment in mapped.treatments:
            key = (treatment, mapped.goal, mapped.region)
            if key in seen:
                continue
            seen.add(key)
            suggested.append(
                SuggestedTreatment(
                    treatment=treatment,
                    goal=mapped.goal,
                    region=mapped.region,
                    example_finding=finding,
                )
            )
    return suggested


def _treats(finding: str, treatment_lower: str, registry: TaxonomyRegistry) -> bool:
    mapped = goal_region_treatments_for_finding(finding, registry)
    return mapped is not None and any(t.lower() == treatment_lower for t in mapped.treatments)


def findings_for_treatment(
    treatment: str,
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> list[str]:
    """Assessment findings, in area order, whose recommendation includes ``treatment``."""
    lower = (treatment or "").lower()
    return [
        finding
        for _, findings in ASSESSMENT_FINDINGS_BY_AREA
        for finding in findings
        if _treats(finding, lower, registry)
    ]


def findings_by_area_for_treatment(
    treatment: str,
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> list[AreaFindings]:
    wanted = set(findings_for_treatment(treatment, registry))
    groups: list[AreaFindings] = []
    for area, findings in ASSESSMENT_FINDINGS_BY_AREA:
        kept = [f for f in findings if f in wanted]
        if kept:
            groups.append(AreaFindings(area=area, findings=kept))
    return groups


def findings_for_here_for(
    here_for: str | None,
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
    findings: Sequence[str] = ASSESSMENT_FINDINGS,
) -> list[str]:
    """Findings treatable by the visit type: "Tox", "Filler", or either when unset."""
    if here_for in HERE_FOR_TREATMENT:
        treatments = {HERE_FOR_TREATMENT[here_for]}
    else:
        treatments = set(HERE_FOR_TREATMENT.values())
    matched: set[str] = set()
    for finding in findings:
        mapped = goal_region_treatments_for_finding(finding, registry)
        if mapped is not None and treatments.intersection(mapped.treatments):
            matched.add(finding)
    return sorted(matched, key=str.casefold)


def findings_from_concerns(concerns: Iterable[str]) -> list[str]:
    """Expand general concerns into their assessment findings, first-seen order."""
    expanded: list[str] = []
    for concern in concerns:
        for finding in GENERAL_CONCERN_TO_FINDINGS.get(concern, ()):
            if finding not in expanded:
                expanded.append(finding)
    return expanded
