"""Response schemas for the DroppyDrop API."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import Field

from droppydrop.models.types import ChatSender
from droppydrop.schemas.common import ApiModel

if TYPE_CHECKING:
    from droppydrop.models.location import PlayerLocation as PlayerLocationModel
    from droppydrop.models.message import DirectMessage as DirectMessageModel
    from droppydrop.models.message import PlayerMessage as PlayerMessageModel
    from droppydrop.models.target import TargetLocation as TargetLocationModel
    from droppydrop.models.test_result import TestResult as TestResultModel
    from droppydrop.services.messaging import ChatEntry
    from droppydrop.services.admin import WipeReport


# ── Locations ─────────────────────────────────────────────────────────────────


class PlayerLocationResponse(ApiModel):
    """A player's last known position."""

    lat: float
    lng: float
    timestamp: datetime = Field(description='When the server received the report.')
    client_timestamp: datetime = Field(alias='clientTimestamp')
    status: str

    @staticmethod
    def from_model(loc: PlayerLocationModel) -> PlayerLocationResponse:
        return PlayerLocationResponse(
            lat=loc.lat,
            lng=loc.lng,
            timestamp=loc.timestamp,
            client_timestamp=loc.client_timestamp,
            status=loc.status,
        )


# ── Messages ──────────────────────────────────────────────────────────────────


class MessageCreatedResponse(ApiModel):
    status: str = 'ok'
    id: int


class PlayerMessageResponse(ApiModel):
    id: int
    player_id: str = Field(alias='playerID')
    content: str
    timestamp: datetime
    is_read: bool = Field(alias='isRead')

    @staticmethod
    def from_model(msg: PlayerMessageModel) -> PlayerMessageResponse:
        assert msg.id is not None
        return PlayerMessageResponse(
            id=msg.id,
            player_id=msg.player_id,
            content=msg.content,
            timestamp=msg.timestamp,
            is_read=msg.is_read,
        )


class DirectMessageResponse(ApiModel):
    id: int
    player_id: str = Field(alias='playerID')
    content: str
    timestamp: datetime

    @staticmethod
    def from_model(dm: DirectMessageModel) -> DirectMessageResponse:
        assert dm.id is not None
        return DirectMessageResponse(
            id=dm.id, player_id=dm.player_id, content=dm.content, timestamp=dm.timestamp
        )


class ChatMessageResponse(ApiModel):
    """One line of the conversation between a player and the leads."""

    sender: ChatSender = Field(alias='from')
    content: str
    timestamp: datetime
    is_read: bool | None = Field(default=None, alias='isRead', description='Player messages only.')

    @staticmethod
    def from_entry(entry: ChatEntry) -> ChatMessageResponse:
        return ChatMessageResponse(
            sender=entry.sender,
            content=entry.content,
            timestamp=entry.timestamp,
            is_read=entry.is_read,
        )


# ── Targets ───────────────────────────────────────────────────────────────────


class TargetResponse(ApiModel):
    lat: float
    lng: float
    timestamp: datetime
    fake_hash: str = Field(alias='fakeHash', description='8-character code shown to the player.')
    is_released: bool = Field(alias='isReleased')

    @staticmethod
    def from_model(target: TargetLocationModel) -> TargetResponse:
        return TargetResponse(
            lat=target.lat,
            lng=target.lng,
            timestamp=target.timestamp,
            fake_hash=target.fake_hash,
            is_released=target.is_released,
        )


class PlayerInboxResponse(ApiModel):
    """What the player page polls for: last own message, last DM, and current target."""

    player_message: PlayerMessageResponse | None = Field(default=None, alias='playerMessage')
    dm: DirectMessageResponse | None = None
    target: TargetResponse | None = None


# ── Identity ──────────────────────────────────────────────────────────────────


class ObfuscatedUrlResponse(ApiModel):
    player_id: str = Field(alias='playerID')
    obfuscated_id: str = Field(alias='obfuscatedID')
    obfuscated_url: str = Field(alias='obfuscatedURL')


# ── Test results ──────────────────────────────────────────────────────────────


class TestResultResponse(ApiModel):
    player_name: str = Field(alias='playerName')
    location_status: str = Field(alias='locationStatus')
    notification_status: str = Field(alias='notificationStatus')
    server_status: str = Field(alias='serverStatus')
    timestamp: datetime

    @staticmethod
    def from_model(result: TestResultModel) -> TestResultResponse:
        return TestResultResponse(
            player_name=result.player_name,
            location_status=result.location_status,
            notification_status=result.notification_status,
            server_status=result.server_status,
            timestamp=result.timestamp,
        )


# ── Admin ─────────────────────────────────────────────────────────────────────


class LoadTargetsResponse(ApiModel):
    message: str
    count: int


class ClearDatastoreResponse(ApiModel):
    message: str
    deleted: int
    kinds: int

    @staticmethod
    def from_report(report: WipeReport) -> ClearDatastoreResponse:
        return ClearDatastoreResponse(
            message=f'Successfully deleted {report.deleted} entities across {report.kinds} kinds.',
            deleted=report.deleted,
            kinds=report.kinds,
        )
