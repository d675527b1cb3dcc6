"""Player link generation."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from droppydrop.dependencies import get_identity_codec
from droppydrop.identity import IdentityCodec
from droppydrop.schemas.request import ObfuscateUrlRequest
from droppydrop.schemas.response import ObfuscatedUrlResponse

router = APIRouter(tags=['identity'])


def _base_url(request: Request) -> str:
    host = request.headers.get('host', '')
    scheme = 'http' if not host or host.startswith('localhost') else 'https'
    return f'{scheme}://{host}'


@router.post('/obfuscate-url', response_model=ObfuscatedUrlResponse)
def obfuscate_url(
    body: ObfuscateUrlRequest,
    request: Request,
    codec: IdentityCodec = Depends(get_identity_codec),
) -> ObfuscatedUrlResponse:
    """Build the shareable player page URL for a player name."""
    obfuscated_id = codec.obfuscate(body.player_id)
    return ObfuscatedUrlResponse(
        player_id=body.player_id,
        obfuscated_id=obfuscated_id,
        obfuscated_url=f'{_base_url(request)}/player/{obfuscated_id}',
    )
