from __future__ import annotations

from ..taxonomy import DEFAULT_REGISTRY, TaxonomyRegistry
from ..taxonomy.rules import matches_any
from .models import GoalsAndRegions


def goals_and_regions_for_treatment(
    treatment: str,
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> GoalsAndRegions:
    """
    Goals and plan regions suggested for a treatment.

    Goals are the interests named by the keywords of every Interest→Treatment row
    listing the treatment; regions come from the Goal→Regions table. With no goals
    both full catalogues are returned; with goals but no regions, the full region
    catalogue.
    """
    lower = (treatment or "").lower()
    goals: list[str] = []
    for rule in registry.interest_rules:
        if not any(t.lower() == lower for t in rule.result):
            continue
        for goal in registry.interest_options:
            if goal not in goals and matches_any(goal, rule.keywords):
                goals.append(goal)

    regions: list[str] = []
    for rule in registry.goal_region_rules:
        if any(matches_any(goal, rule.keywords) for goal in goals):
            for region in rule.result:
                if region not in regions:
                    regions.append(region)

    if not goals:
        return GoalsAndRegions(goals=list(registry.interest_options), regions=list(registry.region_options))
    if not regions:
        return GoalsAndRegions(goals=goals, regions=list(registry.region_options))
    return GoalsAndRegions(goals=goals, regions=regions)
