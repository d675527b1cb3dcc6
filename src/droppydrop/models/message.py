from __future__ import annotations

from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


class PlayerMessage(SQLModel, table=True):
    """A message from a player to the game leads."""

    __tablename__ = 'player_message'  # type: ignore[assignment]

    id: int | None = Field(default=None, primary_key=True)
    player_id: str = Field(index=True)
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)
    is_read: bool = False


class DirectMessage(SQLModel, table=True):
    """A message from a game lead to a single player."""

    __tablename__ = 'direct_message'  # type: ignore[assignment]

    id: int | None = Field(default=None, primary_key=True)
    player_id: str = Field(index=True)
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)
