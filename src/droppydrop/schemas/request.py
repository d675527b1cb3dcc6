"""Request body schemas for the DroppyDrop API."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from droppydrop.schemas.common import ApiModel

# ── Locations ─────────────────────────────────────────────────────────────────


class LocationReportRequest(ApiModel):
    """A player's periodic position or status report.

    Coordinates are omitted when the device has no fix (permission denied, etc.).
    """

    lat: float | None = Field(default=None, ge=-90, le=90)
    lng: float | None = Field(default=None, ge=-180, le=180)
    client_timestamp: datetime = Field(
        alias='clientTimestamp', description='When the device took the fix or saw the status.'
    )
    status: str = Field(description='"OK", "UNAVAILABLE", "PERMISSION DENIED", "NOT SUPPORTED".')


# ── Messages ──────────────────────────────────────────────────────────────────


class MessageRequest(ApiModel):
    """Message text, used both for player messages and lead DMs."""

    message: str


# ── Targets ───────────────────────────────────────────────────────────────────


class TargetRequest(ApiModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


# ── Identity ──────────────────────────────────────────────────────────────────


class ObfuscateUrlRequest(ApiModel):
    player_id: str = Field(alias='playerID', min_length=1, description="The player's real name.")


# ── Test results ──────────────────────────────────────────────────────────────


class TestResultRequest(ApiModel):
    """Outcome of the pre-game test page."""

    player_name: str = Field(alias='playerName', min_length=1)
    location_status: str = Field(alias='locationStatus')
    notification_status: str = Field(alias='notificationStatus')
    server_status: str = Field(alias='serverStatus')
