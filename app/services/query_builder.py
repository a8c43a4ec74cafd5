"""
Thin wrappers re-exporting the canonical Phase 3 festival query builder.

Imports elsewhere use `app.services.query_builder`, while the main
implementation lives in `app.phase3.query_builder`.
"""

from app.phase3.query_builder import *  # noqa: F401,F403
