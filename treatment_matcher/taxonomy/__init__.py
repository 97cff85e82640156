"""
Taxonomy registry.

Responsibilities:
- Transcribe the practice's mapping tables (issue → concern → category, suggestion → area,
  interest → treatments, treatment → products / meta).
- Provide total, read-only lookups: unknown keys resolve to empty results, never errors.
- Model keyword tables as uniform rule rows with a per-table substring direction.
"""
from .registry import DEFAULT_REGISTRY, TaxonomyRegistry

__all__ = ["DEFAULT_REGISTRY", "TaxonomyRegistry"]
