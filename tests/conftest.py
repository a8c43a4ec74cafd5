from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import insert

from app.main import app
from app.phase3.database import (
    art_forms,
    create_db_engine,
    create_schema,
    festival_genres,
    festivals,
    genres,
    make_session_factory,
)
from app.schemas.festivals import Festival


SAMPLE_FESTIVALS = [
    Festival(country="Germany", name="Berlinale", place="Berlin", time="February", genre="Film", web="www.berlinale.de"),
    Festival(country="United Kingdom", name="Edinburgh Festival Fringe", place="Edinburgh", time="August", genre="Theatre, Comedy", web="https://www.edfringe.com"),
    Festival(country="Switzerland", name="Montreux Jazz Festival", place="Montreux", time="July", genre="Music / Jazz", web="montreuxjazzfestival.com"),
    Festival(country="Germany", name="Jazzfest Berlin", place="Berlin", time=2026, genre="Jazz", web=""),
    Festival(country="France", name="Festival d'Avignon", place="Avignon", time="July", genre="Theatre, Dance", web="festival-avignon.com"),
]


@pytest.fixture
def sample_festivals():
    return list(SAMPLE_FESTIVALS)


def seed_festival_store(engine) -> None:
    """
    Seed a small festival catalogue.

    Montreux has two jazz genres and "Jazz Theatre Days" is a theatre
    festival with jazz genres, so genre filters exercise the join fan-out.
    """
    create_schema(engine)
    with engine.begin() as conn:
        conn.execute(
            insert(art_forms),
            [
                {"id": 1, "name": "Music"},
                {"id": 2, "name": "Theatre"},
                {"id": 3, "name": "Film"},
            ],
        )
        conn.execute(
            insert(genres),
            [
                {"id": 1, "name": "Jazz"},
                {"id": 2, "name": "Acid Jazz"},
                {"id": 3, "name": "Blues"},
                {"id": 4, "name": "Comedy"},
                {"id": 5, "name": "Documentary"},
            ],
        )
        conn.execute(
            insert(festivals),
            [
                {"id": 1, "name": "Montreux Jazz Festival", "country": "Switzerland", "city": "Montreux", "time": "July", "web": "montreuxjazzfestival.com", "art_form_id": 1},
                {"id": 2, "name": "North Sea Jazz", "country": "Netherlands", "city": "Rotterdam", "time": "July", "web": "northseajazz.com", "art_form_id": 1},
                {"id": 3, "name": "Edinburgh Festival Fringe", "country": "United Kingdom", "city": "Edinburgh", "time": "August", "web": "edfringe.com", "art_form_id": 2},
                {"id": 4, "name": "Berlinale", "country": "Germany", "city": "Berlin", "time": "February", "web": "berlinale.de", "art_form_id": 3},
                {"id": 5, "name": "Jazz Theatre Days", "country": "Germany", "city": "Munich", "time": "October", "web": None, "art_form_id": 2},
                {"id": 6, "name": "100% Music Days", "country": "Germany", "city": "Hamburg", "time": "June", "web": None, "art_form_id": 1},
                {"id": 7, "name": "Gentse Feesten", "country": "Belgium", "city": "Ghent", "time": "July", "web": None, "art_form_id": None},
            ],
        )
        conn.execute(
            insert(festival_genres),
            [
                {"festival_id": 1, "genre_id": 1},
                {"festival_id": 1, "genre_id": 2},
                {"festival_id": 1, "genre_id": 3},
                {"festival_id": 2, "genre_id": 1},
                {"festival_id": 3, "genre_id": 4},
                {"festival_id": 4, "genre_id": 5},
                {"festival_id": 5, "genre_id": 1},
                {"festival_id": 5, "genre_id": 2},
            ],
        )


@pytest.fixture
def db_engine():
    engine = create_db_engine("sqlite://")
    seed_festival_store(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return make_session_factory(db_engine)


@pytest.fixture
def client(sample_festivals, session_factory):
    app.state.festivals = sample_festivals
    app.state.session_factory = session_factory
    yield TestClient(app)
    del app.state.festivals
    del app.state.session_factory
