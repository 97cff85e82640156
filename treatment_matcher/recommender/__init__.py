"""
On-demand recommendations derived from the taxonomy tables.

Responsibilities:
- Turn an assessment finding into a goal, a region and candidate treatments.
- Suggest goals and regions for a treatment, with full-catalogue fallbacks.
- Recommend products for a treatment from free-text goal or finding context.
- Supply plan-entry helpers: quantity units, same-day filtering, display areas.
"""
from __future__ import annotations

from .findings import goal_region_treatments_for_finding, suggested_treatments_for_findings
from .goals import goals_and_regions_for_treatment
from .products import recommended_products

__all__ = [
    "goal_region_treatments_for_finding",
    "goals_and_regions_for_treatment",
    "recommended_products",
    "suggested_treatments_for_findings",
]
