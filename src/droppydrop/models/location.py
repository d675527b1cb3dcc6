from __future__ import annotations

from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


class PlayerLocation(SQLModel, table=True):
    """Last reported position and status of a player. Keyed by the player's real name."""

    __tablename__ = 'player_location'  # type: ignore[assignment]

    player_id: str = Field(primary_key=True)
    lat: float = 0.0
    lng: float = 0.0
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))  # server receipt
    client_timestamp: datetime
    status: str

    @property
    def has_fix(self) -> bool:
        # A latitude of exactly 0.0 is read as "never had a fix".
        return self.lat != 0
