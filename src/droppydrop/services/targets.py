"""Target assignment: per-player target coordinates with a cosmetic display code."""

from __future__ import annotations

import hashlib
import hmac
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter

from droppydrop.datastore import Datastore
from droppydrop.models.target import TargetLocation

FAKE_HASH_LENGTH = 8


def make_fake_hash(secret: str, lat: float, lng: float, ns: int) -> str:
    """Derive the 8-character target code shown to players. Not used for any check."""
    data = f'{lat:.6f},{lng:.6f},{ns}'
    digest = hmac.new(secret.encode(), data.encode(), hashlib.sha256).hexdigest()
    return digest[:FAKE_HASH_LENGTH].upper()


def _new_target(player_id: str, lat: float, lng: float, secret: str) -> TargetLocation:
    ns = time.time_ns()
    return TargetLocation(
        player_id=player_id,
        lat=lat,
        lng=lng,
        timestamp=datetime.fromtimestamp(ns / 1e9, UTC),
        fake_hash=make_fake_hash(secret, lat, lng, ns),
        is_released=True,
    )


def set_target(
    store: Datastore, player_id: str, lat: float, lng: float, *, secret: str
) -> TargetLocation:
    """Assign a target to a player, replacing any previous one."""
    return store.put(_new_target(player_id, lat, lng, secret))


def get_target(store: Datastore, player_id: str) -> TargetLocation | None:
    return store.get(TargetLocation, player_id)


def list_targets(store: Datastore) -> dict[str, TargetLocation]:
    return {t.player_id: t for t in store.query(TargetLocation)}


# ── Bulk load ────────────────────────────────────────────────────────────────


@dataclass
class TargetEntry:
    player_name: str
    lat: float
    lng: float


def bulk_load_targets(
    store: Datastore, entries: list[TargetEntry], *, secret: str
) -> list[TargetLocation]:
    """Write one released target per entry in a single batch."""
    targets = [_new_target(e.player_name, e.lat, e.lng, secret) for e in entries]
    return store.put_multi(targets)


class _Coordinates(BaseModel):
    lat: float
    lng: float


class InitialTarget(BaseModel):
    """One record of the seed file."""

    player_name: str = Field(alias='playerName')
    target: _Coordinates

    def to_entry(self) -> TargetEntry:
        return TargetEntry(player_name=self.player_name, lat=self.target.lat, lng=self.target.lng)


_initial_targets_adapter = TypeAdapter(list[InitialTarget])


def read_initial_targets(path: Path) -> list[TargetEntry]:
    """Parse the seed file. Raises OSError if unreadable, ValidationError if malformed."""
    records = _initial_targets_adapter.validate_json(path.read_bytes())
    return [r.to_entry() for r in records]
