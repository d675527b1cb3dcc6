from __future__ import annotations

from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


class TargetLocation(SQLModel, table=True):
    __tablename__ = 'target_location'  # type: ignore[assignment]

    player_id: str = Field(primary_key=True)
    lat: float
    lng: float
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    fake_hash: str = Field(max_length=8)  # cosmetic code shown to the player
    is_released: bool = True
