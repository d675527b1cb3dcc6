from __future__ import annotations

from droppydrop.models.location import PlayerLocation
from droppydrop.models.message import DirectMessage, PlayerMessage
from droppydrop.models.target import TargetLocation
from droppydrop.models.test_result import TestResult
from droppydrop.models.types import DEFAULT_LAT, DEFAULT_LNG, ChatSender, LocationStatus

# Every entity kind held in the datastore, in wipe order.
KINDS = (PlayerLocation, PlayerMessage, DirectMessage, TargetLocation, TestResult)

__all__ = [
    # Table models
    'DirectMessage',
    'PlayerLocation',
    'PlayerMessage',
    'TargetLocation',
    'TestResult',
    'KINDS',
    # Enums
    'ChatSender',
    'LocationStatus',
    # Constants
    'DEFAULT_LAT',
    'DEFAULT_LNG',
]
