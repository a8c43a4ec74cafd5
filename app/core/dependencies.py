"""
FastAPI dependencies for the shared festival dataset and database sessions.

Both live on `app.state` and are created on first use, so tests (or an
embedding application) can install their own before the first request.
"""

from __future__ import annotations

from typing import Annotated, List

from fastapi import Depends, Request
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings
from app.phase1.dataset_loader import load_festivals
from app.phase3.database import create_db_engine, make_session_factory
from app.schemas.festivals import Festival


def get_festival_dataset(request: Request) -> List[Festival]:
    festivals = getattr(request.app.state, "festivals", None)
    if festivals is None:
        festivals = load_festivals(settings.FESTIVALS_DATASET_PATH)
        request.app.state.festivals = festivals
    return festivals


def get_session_factory(request: Request) -> sessionmaker[Session]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        engine = create_db_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)
        session_factory = make_session_factory(engine)
        request.app.state.session_factory = session_factory
    return session_factory


FestivalsDep = Annotated[List[Festival], Depends(get_festival_dataset)]
