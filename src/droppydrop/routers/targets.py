"""Target assignment endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from droppydrop.config import Settings, get_settings
from droppydrop.datastore import Datastore
from droppydrop.dependencies import get_datastore, get_player_id
from droppydrop.schemas.request import TargetRequest
from droppydrop.schemas.response import TargetResponse
from droppydrop.services.targets import list_targets, set_target

router = APIRouter(tags=['targets'])


@router.post('/target/{obfuscated_id}', response_model=TargetResponse, status_code=201)
def post_target(
    body: TargetRequest,
    player_id: str = Depends(get_player_id),
    store: Datastore = Depends(get_datastore),
    settings: Settings = Depends(get_settings),
) -> TargetResponse:
    """Lead sets (or replaces) a player's target. It is released immediately."""
    target = set_target(store, player_id, body.lat, body.lng, secret=settings.hmac_secret)
    return TargetResponse.from_model(target)


@router.get('/targets', response_model=dict[str, TargetResponse])
def get_targets(store: Datastore = Depends(get_datastore)) -> dict[str, TargetResponse]:
    """Current target of every player, keyed by player id."""
    return {pid: TargetResponse.from_model(t) for pid, t in list_targets(store).items()}
