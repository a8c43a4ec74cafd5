"""
Thin wrappers re-exporting the canonical Phase 2 festival search.

Imports elsewhere use `app.services.filtering_engine`, while the
search itself lives in `app.phase2.services.filtering_engine`.
"""

from app.phase2.services.filtering_engine import *  # noqa: F401,F403
