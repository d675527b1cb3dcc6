"""Destructive maintenance operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from droppydrop.datastore import Datastore
from droppydrop.models import KINDS

logger = logging.getLogger(__name__)


@dataclass
class WipeReport:
    deleted: int
    kinds: int


def wipe_all(store: Datastore, *, batch_size: int = 500) -> WipeReport:
    """Delete every entity of every kind, batch_size keys per delete call."""
    total = 0
    for kind in KINDS:
        keys = store.keys(kind)
        if not keys:
            continue
        for start in range(0, len(keys), batch_size):
            store.delete_multi(kind, keys[start : start + batch_size])
        logger.info('Deleted %d entities of kind %s', len(keys), kind.__name__)
        total += len(keys)
    return WipeReport(deleted=total, kinds=len(KINDS))
