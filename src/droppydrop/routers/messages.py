"""Player messages, lead DMs and chat history endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from droppydrop.datastore import Datastore, DatastoreError, EntityNotFoundError
from droppydrop.dependencies import get_datastore, get_player_id
from droppydrop.schemas.common import StatusResponse
from droppydrop.schemas.request import MessageRequest
from droppydrop.schemas.response import (
    ChatMessageResponse,
    DirectMessageResponse,
    MessageCreatedResponse,
    PlayerInboxResponse,
    PlayerMessageResponse,
    TargetResponse,
)
from droppydrop.services.messaging import (
    get_chat_history,
    get_latest_direct_message,
    get_latest_player_message,
    list_player_messages,
    mark_read,
    send_direct_message,
    send_player_message,
)
from droppydrop.services.targets import get_target

logger = logging.getLogger(__name__)

router = APIRouter(tags=['messages'])


@router.post('/messages/read/{message_id}', response_model=StatusResponse)
def mark_message_read(message_id: int, store: Datastore = Depends(get_datastore)) -> StatusResponse:
    """Lead marks a player message as read."""
    try:
        mark_read(store, message_id)
    except EntityNotFoundError:
        logger.warning('Message %d not found, cannot mark as read', message_id)
        raise HTTPException(status_code=404, detail='Message not found.') from None
    return StatusResponse()


@router.post('/messages/{obfuscated_id}', response_model=MessageCreatedResponse, status_code=201)
def post_player_message(
    body: MessageRequest,
    player_id: str = Depends(get_player_id),
    store: Datastore = Depends(get_datastore),
) -> MessageCreatedResponse:
    """Player sends a message to the leads."""
    message = send_player_message(store, player_id, body.message)
    assert message.id is not None
    return MessageCreatedResponse(id=message.id)


@router.get(
    '/messages/{obfuscated_id}',
    response_model=PlayerInboxResponse,
    response_model_exclude_none=True,
)
def get_player_inbox(
    player_id: str = Depends(get_player_id),
    store: Datastore = Depends(get_datastore),
) -> PlayerInboxResponse:
    """Player polls for their last message's read state, the latest DM and their target."""
    inbox = PlayerInboxResponse()

    message = get_latest_player_message(store, player_id)
    if message is not None:
        inbox.player_message = PlayerMessageResponse.from_model(message)

    dm = get_latest_direct_message(store, player_id)
    if dm is not None:
        inbox.dm = DirectMessageResponse.from_model(dm)

    # A failed target lookup degrades to "no target" rather than failing the poll.
    try:
        target = get_target(store, player_id)
    except DatastoreError as exc:
        logger.error('Failed to get target location for player %s: %s', player_id, exc)
        target = None
    if target is not None:
        inbox.target = TargetResponse.from_model(target)

    return inbox


@router.get('/messages', response_model=list[PlayerMessageResponse])
def get_all_messages(store: Datastore = Depends(get_datastore)) -> list[PlayerMessageResponse]:
    """All player messages for the lead view, newest first."""
    return [PlayerMessageResponse.from_model(m) for m in list_player_messages(store)]


@router.post('/dm/{obfuscated_id}', response_model=MessageCreatedResponse, status_code=201)
def post_direct_message(
    body: MessageRequest,
    player_id: str = Depends(get_player_id),
    store: Datastore = Depends(get_datastore),
) -> MessageCreatedResponse:
    """Lead sends a direct message to a player."""
    dm = send_direct_message(store, player_id, body.message)
    assert dm.id is not None
    return MessageCreatedResponse(id=dm.id)


@router.get(
    '/chat/{obfuscated_id}',
    response_model=list[ChatMessageResponse],
    response_model_exclude_none=True,
)
def get_chat(
    player_id: str = Depends(get_player_id),
    store: Datastore = Depends(get_datastore),
) -> list[ChatMessageResponse]:
    """Full conversation between a player and the leads, oldest first."""
    return [ChatMessageResponse.from_entry(e) for e in get_chat_history(store, player_id)]
