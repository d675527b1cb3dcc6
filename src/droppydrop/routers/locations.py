"""Location reporting endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from droppydrop.datastore import Datastore
from droppydrop.dependencies import get_datastore, get_player_id
from droppydrop.schemas.common import StatusResponse
from droppydrop.schemas.request import LocationReportRequest
from droppydrop.schemas.response import PlayerLocationResponse
from droppydrop.services.locations import list_locations, report_location

router = APIRouter(prefix='/locations', tags=['locations'])


@router.post('/{obfuscated_id}', response_model=StatusResponse)
def post_location(
    body: LocationReportRequest,
    player_id: str = Depends(get_player_id),
    store: Datastore = Depends(get_datastore),
) -> StatusResponse:
    """Report a player's position, or a status change when there is no fix."""
    report_location(
        store,
        player_id,
        lat=body.lat,
        lng=body.lng,
        status=body.status,
        client_timestamp=body.client_timestamp,
    )
    return StatusResponse()


@router.get('', response_model=dict[str, PlayerLocationResponse])
def get_locations(store: Datastore = Depends(get_datastore)) -> dict[str, PlayerLocationResponse]:
    """Last known location of every player, keyed by player id."""
    return {
        player_id: PlayerLocationResponse.from_model(loc)
        for player_id, loc in list_locations(store).items()
    }
