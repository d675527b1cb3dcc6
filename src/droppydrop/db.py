from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

from sqlmodel import Session, SQLModel, create_engine

from droppydrop.config import get_settings

DB_URL = get_settings().database_url

_connect_args = {'check_same_thread': False} if DB_URL.startswith('sqlite') else {}

engine = create_engine(DB_URL, connect_args=_connect_args)


def sqlite_file(url: str) -> Path | None:
    """Return the database file of a file-backed SQLite URL, or None for anything else."""
    if not url.startswith('sqlite:///'):
        return None
    path = url.removeprefix('sqlite:///')
    if not path or path == ':memory:':
        return None
    return Path(path)


def create_db_and_tables() -> None:
    import droppydrop.models  # noqa: F401 — registers all tables on metadata

    db_file = sqlite_file(DB_URL)
    if db_file is not None:
        db_file.parent.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session
