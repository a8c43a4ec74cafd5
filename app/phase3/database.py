"""
Relational schema and connection helpers for the festivals store.

Tables:
- festivals        scalar festival attributes, many-to-one art form
- art_forms        primary discipline (Music, Theatre, ...)
- genres           finer-grained tags
- festival_genres  many-to-many join between festivals and genres
"""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy import (
    Column,
    Engine,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    text,
)
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


metadata = MetaData()

art_forms = Table(
    "art_forms",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String, nullable=False, unique=True),
)

genres = Table(
    "genres",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String, nullable=False, unique=True),
)

festivals = Table(
    "festivals",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String, nullable=False),
    Column("country", String),
    Column("city", String),
    Column("time", String),
    Column("web", String),
    Column("art_form_id", Integer, ForeignKey("art_forms.id"), nullable=True),
)

festival_genres = Table(
    "festival_genres",
    metadata,
    Column("festival_id", Integer, ForeignKey("festivals.id"), primary_key=True),
    Column("genre_id", Integer, ForeignKey("genres.id"), primary_key=True),
)


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine for `url`.

    In-memory SQLite gets a single shared connection so every session sees
    the same database.
    """
    kwargs: Dict[str, Any] = {"echo": echo}
    in_memory = url.startswith("sqlite") and (
        ":memory:" in url or url.rstrip("/").endswith(":")
    )
    if in_memory:
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_pre_ping"] = True
    return create_engine(url, **kwargs)


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    metadata.create_all(engine)


def ping(session: Session) -> None:
    """Run a trivial round trip; raises if the store is unreachable."""
    session.execute(text("SELECT 1"))
