"""Player location tracking: upsert by player id with last-known-position retention."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from droppydrop.datastore import Datastore
from droppydrop.models.location import PlayerLocation
from droppydrop.models.types import DEFAULT_LAT, DEFAULT_LNG, LocationStatus

logger = logging.getLogger(__name__)


def report_location(
    store: Datastore,
    player_id: str,
    *,
    lat: float | None,
    lng: float | None,
    status: str,
    client_timestamp: datetime,
) -> PlayerLocation:
    """Store a player's latest fix or status.

    A report without a usable fix keeps the previous coordinates, so a status
    change (e.g. permission revoked) never wipes the last known position.
    An OK report missing either coordinate counts as status-only and also
    keeps the last fix.
    Players with no previous fix are placed at the default location.
    """
    if status == LocationStatus.ok and lat is not None and lng is not None:
        new_lat, new_lng = lat, lng
    else:
        existing = store.get(PlayerLocation, player_id)
        if existing is not None and existing.has_fix:
            new_lat, new_lng = existing.lat, existing.lng
        else:
            new_lat, new_lng = DEFAULT_LAT, DEFAULT_LNG
        logger.debug('Status-only update for %s (%s)', player_id, status)

    location = PlayerLocation(
        player_id=player_id,
        lat=new_lat,
        lng=new_lng,
        timestamp=datetime.now(UTC),
        client_timestamp=client_timestamp,
        status=status,
    )
    return store.put(location)


def list_locations(store: Datastore) -> dict[str, PlayerLocation]:
    """Return the latest location of every player ever seen, keyed by player id."""
    return {loc.player_id: loc for loc in store.query(PlayerLocation)}
