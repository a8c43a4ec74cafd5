"""
Thin wrappers re-exporting the canonical Phase 1 festival loader.

Imports elsewhere use `app.services.dataset_loader`, while the
normalizer itself lives in `app.phase1.dataset_loader`.
"""

from app.phase1.dataset_loader import *  # noqa: F401,F403
