from __future__ import annotations

import logging

from ..taxonomy import DEFAULT_REGISTRY, TaxonomyRegistry
from ..taxonomy.treatments import OTHER_PRODUCT_LABEL

logger = logging.getLogger(__name__)


def recommended_products(
    treatment: str,
    context: str,
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> list[str]:
    """
    Products recommended for ``treatment`` by keywords found in ``context``.

    Every matching context row contributes, restricted to the treatment's own
    product catalogue. Duplicates are dropped and first-seen order kept. A blank
    context or a treatment without a catalogue yields an empty list.
    """
    if not (context or "").strip():
        return []
    catalogue = [p for p in registry.products_for_treatment(treatment) if p != OTHER_PRODUCT_LABEL]
    if not catalogue:
        return []
    allowed = set(catalogue)
    recommended: list[str] = []
    for row in registry.context_products(treatment, context):
        for product in row.products:
            if product in allowed and product not in recommended:
                recommended.append(product)
    logger.debug("Recommended %d products for %s from context %r", len(recommended), treatment, context)
    return recommended
