"""Key/value persistence gateway over a SQLModel session.

Each entity kind is a table model whose primary key column is the entity key:
a player name for upserted kinds, an auto-generated integer for messages.
Services receive a ``Datastore`` and never touch the session directly.
"""

from __future__ import annotations

from collections.abc import Generator, Sequence
from contextlib import contextmanager
from typing import Any, TypeVar

import sqlalchemy as sa
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select

E = TypeVar('E', bound=SQLModel)

Key = str | int


class DatastoreError(Exception):
    """A gateway operation failed. The session has been rolled back."""

    def __init__(self, operation: str, kind: type[SQLModel], key: Any = None) -> None:
        self.operation = operation
        self.kind = kind.__name__
        self.key = key
        target = self.kind if key is None else f'{self.kind}({key!r})'
        super().__init__(f'{operation} {target} failed')


class EntityNotFoundError(LookupError):
    """A record that the operation requires does not exist."""

    def __init__(self, kind: type[SQLModel], key: Key) -> None:
        self.kind = kind.__name__
        self.key = key
        super().__init__(f'{self.kind}({key!r}) not found')


def _key_column(kind: type[SQLModel]) -> sa.Column:
    return sa.inspect(kind).primary_key[0]


class Datastore:
    def __init__(self, session: Session) -> None:
        self.session = session

    @contextmanager
    def _guard(self, operation: str, kind: type[SQLModel], key: Any = None) -> Generator[None, None, None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise DatastoreError(operation, kind, key) from exc

    def get(self, kind: type[E], key: Key) -> E | None:
        """Return the entity stored under key, or None."""
        with self._guard('get', kind, key):
            return self.session.get(kind, key)

    def put(self, entity: E) -> E:
        """Create or fully replace an entity by its key. A None key is generated on insert."""
        return self.put_multi([entity])[0]

    def put_multi(self, entities: Sequence[E]) -> list[E]:
        """Upsert several entities in one commit. Either all are written or none are."""
        if not entities:
            return []
        kind = type(entities[0])
        key = getattr(entities[0], _key_column(kind).name) if len(entities) == 1 else None
        with self._guard('put', kind, key):
            merged = [self.session.merge(entity) for entity in entities]
            self.session.commit()
            for entity in merged:
                self.session.refresh(entity)
        return merged

    def query(
        self,
        kind: type[E],
        *filters: Any,
        order_by: Any = None,
        limit: int | None = None,
    ) -> list[E]:
        """Return entities of a kind matching all filters."""
        stmt = select(kind)
        if filters:
            stmt = stmt.where(*filters)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        with self._guard('query', kind):
            return list(self.session.exec(stmt).all())

    def keys(self, kind: type[SQLModel]) -> list[Key]:
        """Return every key of a kind."""
        with self._guard('keys', kind):
            return list(self.session.exec(select(_key_column(kind))).all())

    def delete_multi(self, kind: type[SQLModel], keys: Sequence[Key]) -> int:
        """Delete the entities stored under keys in one commit. Returns the number deleted."""
        if not keys:
            return 0
        with self._guard('delete', kind):
            entities = self.session.exec(select(kind).where(_key_column(kind).in_(keys))).all()
            for entity in entities:
                self.session.delete(entity)
            self.session.commit()
        return len(entities)
