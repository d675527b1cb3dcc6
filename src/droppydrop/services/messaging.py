"""Player-to-lead messages, lead-to-player direct messages, and the merged chat view."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from sqlmodel import col

from droppydrop.datastore import Datastore, EntityNotFoundError
from droppydrop.models.message import DirectMessage, PlayerMessage
from droppydrop.models.types import ChatSender

# ── Player messages ──────────────────────────────────────────────────────────


def send_player_message(store: Datastore, player_id: str, content: str) -> PlayerMessage:
    """Append an unread message from a player. The returned message carries its new id."""
    message = PlayerMessage(
        player_id=player_id,
        content=content,
        timestamp=datetime.now(UTC),
        is_read=False,
    )
    return store.put(message)


def get_latest_player_message(store: Datastore, player_id: str) -> PlayerMessage | None:
    messages = store.query(
        PlayerMessage,
        PlayerMessage.player_id == player_id,
        order_by=col(PlayerMessage.timestamp).desc(),
        limit=1,
    )
    return messages[0] if messages else None


def mark_read(store: Datastore, message_id: int) -> PlayerMessage:
    """Flag a message as read. Marking an already-read message again is a no-op."""
    message = store.get(PlayerMessage, message_id)
    if message is None:
        raise EntityNotFoundError(PlayerMessage, message_id)
    message.is_read = True
    return store.put(message)


def list_player_messages(store: Datastore) -> list[PlayerMessage]:
    """All player messages, newest first."""
    return store.query(PlayerMessage, order_by=col(PlayerMessage.timestamp).desc())


# ── Direct messages ──────────────────────────────────────────────────────────


def send_direct_message(store: Datastore, player_id: str, content: str) -> DirectMessage:
    message = DirectMessage(player_id=player_id, content=content, timestamp=datetime.now(UTC))
    return store.put(message)


def get_latest_direct_message(store: Datastore, player_id: str) -> DirectMessage | None:
    messages = store.query(
        DirectMessage,
        DirectMessage.player_id == player_id,
        order_by=col(DirectMessage.timestamp).desc(),
        limit=1,
    )
    return messages[0] if messages else None


# ── Chat history ─────────────────────────────────────────────────────────────


@dataclass
class ChatEntry:
    """One line of a player's conversation with the leads."""

    sender: ChatSender
    content: str
    timestamp: datetime
    is_read: bool | None = None  # only meaningful for player messages


def get_chat_history(store: Datastore, player_id: str) -> list[ChatEntry]:
    """Merge a player's messages and the leads' DMs into one conversation, oldest first."""
    entries = [
        ChatEntry(
            sender=ChatSender.player,
            content=m.content,
            timestamp=m.timestamp,
            is_read=m.is_read,
        )
        for m in store.query(PlayerMessage, PlayerMessage.player_id == player_id)
    ]
    entries.extend(
        ChatEntry(sender=ChatSender.lead, content=dm.content, timestamp=dm.timestamp)
        for dm in store.query(DirectMessage, DirectMessage.player_id == player_id)
    )
    entries.sort(key=lambda e: e.timestamp)
    return entries
