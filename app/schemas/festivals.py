"""
Thin wrappers re-exporting the canonical Phase 2 festival schemas.

Imports elsewhere use `app.schemas.festivals`, while the main
implementation lives in `app.phase2.schemas.festivals`.
"""

from app.phase2.schemas.festivals import *  # noqa: F401,F403
