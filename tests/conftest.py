from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import droppydrop.models  # noqa: F401 — registers all tables on metadata
from droppydrop.config import Settings, get_settings
from droppydrop.datastore import Datastore
from droppydrop.db import get_session
from droppydrop.identity import IdentityCodec
from droppydrop.main import app
from droppydrop.models.location import PlayerLocation
from droppydrop.models.message import DirectMessage, PlayerMessage
from droppydrop.models.target import TargetLocation

TEST_KEY = 'THIS_IS_A_STATIC_32_BYTE_SECRET_KEY'


@pytest.fixture
def session() -> Generator[Session, None, None]:
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def store(session: Session) -> Datastore:
    return Datastore(session)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        obfuscation_key=TEST_KEY,
        initial_targets_path=tmp_path / 'initial_targets.json',
        static_dir=tmp_path / 'static',
        app_version='test-version',
    )


@pytest.fixture
def client(session: Session, settings: Settings) -> Generator[TestClient, None, None]:
    def _override_get_session() -> Generator[Session, None, None]:
        yield session

    app.dependency_overrides[get_session] = _override_get_session
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def codec() -> IdentityCodec:
    return IdentityCodec(TEST_KEY)


def token(name: str) -> str:
    """Obfuscated id for a player name, as it appears in player URLs."""
    return IdentityCodec(TEST_KEY).obfuscate(name)


# ── Factory functions ─────────────────────────────────────────────────────────


def create_location(session: Session, player_id: str, **overrides: Any) -> PlayerLocation:
    defaults: dict[str, Any] = {
        'player_id': player_id,
        'lat': 51.05,
        'lng': 3.72,
        'timestamp': datetime.now(UTC),
        'client_timestamp': datetime.now(UTC),
        'status': 'OK',
    }
    defaults.update(overrides)
    loc = PlayerLocation(**defaults)
    session.add(loc)
    session.commit()
    session.refresh(loc)
    return loc


def create_player_message(session: Session, player_id: str, **overrides: Any) -> PlayerMessage:
    defaults: dict[str, Any] = {
        'player_id': player_id,
        'content': 'Where do we go?',
        'timestamp': datetime.now(UTC),
        'is_read': False,
    }
    defaults.update(overrides)
    msg = PlayerMessage(**defaults)
    session.add(msg)
    session.commit()
    session.refresh(msg)
    return msg


def create_direct_message(session: Session, player_id: str, **overrides: Any) -> DirectMessage:
    defaults: dict[str, Any] = {
        'player_id': player_id,
        'content': 'Head north.',
        'timestamp': datetime.now(UTC),
    }
    defaults.update(overrides)
    dm = DirectMessage(**defaults)
    session.add(dm)
    session.commit()
    session.refresh(dm)
    return dm


def create_target(session: Session, player_id: str, **overrides: Any) -> TargetLocation:
    defaults: dict[str, Any] = {
        'player_id': player_id,
        'lat': 51.04,
        'lng': 3.73,
        'timestamp': datetime.now(UTC),
        'fake_hash': 'ABCD1234',
        'is_released': True,
    }
    defaults.update(overrides)
    target = TargetLocation(**defaults)
    session.add(target)
    session.commit()
    session.refresh(target)
    return target
