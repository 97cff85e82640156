"""
Treatment matcher service for the client dashboard.

Responsibilities:
- Hold the treatment taxonomy (issues, concerns, interests, treatments, products).
- Filter and rank before/after examples and suggestion cards against a selection.
- Derive goal / region / treatment bundles for new treatment-plan entries.
- Expose the engine over a small HTTP API.
"""
