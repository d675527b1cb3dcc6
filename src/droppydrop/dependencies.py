"""Shared FastAPI dependencies for the DroppyDrop API."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Path
from sqlmodel import Session

from droppydrop.config import Settings, get_settings
from droppydrop.datastore import Datastore
from droppydrop.db import get_session
from droppydrop.identity import IdentityCodec, InvalidObfuscatedIdError


def get_datastore(session: Session = Depends(get_session)) -> Datastore:
    return Datastore(session)


def get_identity_codec(settings: Settings = Depends(get_settings)) -> IdentityCodec:
    return IdentityCodec(settings.obfuscation_key)


def get_player_id(
    obfuscated_id: str = Path(description='Obfuscated player id from the player URL.'),
    codec: IdentityCodec = Depends(get_identity_codec),
) -> str:
    """Resolve the obfuscated_id path param to the real player id, or 400."""
    try:
        return codec.deobfuscate(obfuscated_id)
    except InvalidObfuscatedIdError:
        raise HTTPException(status_code=400, detail='Invalid player id.') from None
