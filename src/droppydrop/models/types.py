from __future__ import annotations

from enum import StrEnum


class LocationStatus(StrEnum):
    """Status strings reported by the player page. Other values are stored as-is."""

    ok = 'OK'
    unavailable = 'UNAVAILABLE'
    permission_denied = 'PERMISSION DENIED'
    not_supported = 'NOT SUPPORTED'


class ChatSender(StrEnum):
    player = 'player'
    lead = 'lead'


# Where a player with no prior fix is placed on the map.
DEFAULT_LAT = 51.03528074190589
DEFAULT_LNG = 3.9737665526527852
