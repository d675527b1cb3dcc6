from __future__ import annotations

import hashlib
import hmac

from fastapi.testclient import TestClient
from sqlmodel import Session

from droppydrop.datastore import Datastore
from droppydrop.services.targets import (
    TargetEntry,
    bulk_load_targets,
    get_target,
    list_targets,
    make_fake_hash,
    set_target,
)
from tests.conftest import create_target, token

SECRET = 'a-very-secret-key-for-the-game'


# ── Service ──────────────────────────────────────────────────────────────────


def test_make_fake_hash():
    expected = hmac.new(
        SECRET.encode(), b'51.100000,3.700000,1700000000000000000', hashlib.sha256
    ).hexdigest()[:8].upper()
    assert make_fake_hash(SECRET, 51.1, 3.7, 1_700_000_000_000_000_000) == expected


def test_make_fake_hash_shape():
    code = make_fake_hash(SECRET, 0.0, 0.0, 1)
    assert len(code) == 8
    assert code == code.upper()
    assert all(c in '0123456789ABCDEF' for c in code)
    assert make_fake_hash(SECRET, 0.0, 0.0, 2) != code


def test_set_target(store: Datastore):
    target = set_target(store, 'alice', 51.0, 3.7, secret=SECRET)
    assert (target.lat, target.lng) == (51.0, 3.7)
    assert target.is_released is True
    assert len(target.fake_hash) == 8


def test_set_target_twice_replaces(store: Datastore):
    first = set_target(store, 'alice', 51.0, 3.7, secret=SECRET)
    first_hash = first.fake_hash
    set_target(store, 'alice', 52.0, 4.7, secret=SECRET)

    target = get_target(store, 'alice')
    assert (target.lat, target.lng) == (52.0, 4.7)
    assert target.fake_hash != first_hash
    assert list(list_targets(store)) == ['alice']


def test_get_target_missing(store: Datastore):
    assert get_target(store, 'nobody') is None


def test_bulk_load_targets(store: Datastore, session: Session):
    create_target(session, 'alice', lat=1.0, lng=1.0)
    written = bulk_load_targets(
        store,
        [TargetEntry('alice', 51.0, 3.7), TargetEntry('bob', 52.0, 4.7)],
        secret=SECRET,
    )
    assert len(written) == 2

    targets = list_targets(store)
    assert (targets['alice'].lat, targets['alice'].lng) == (51.0, 3.7)
    assert targets['bob'].is_released is True


# ── POST /target/{obfuscated_id} ────────────────────────────────────────────


def test_post_target(client: TestClient):
    resp = client.post(f'/target/{token("alice")}', json={'lat': 51.0, 'lng': 3.7})
    assert resp.status_code == 201
    data = resp.json()
    assert (data['lat'], data['lng']) == (51.0, 3.7)
    assert data['isReleased'] is True
    assert len(data['fakeHash']) == 8


def test_post_target_replaces_previous(client: TestClient):
    first = client.post(f'/target/{token("alice")}', json={'lat': 51.0, 'lng': 3.7}).json()
    second = client.post(f'/target/{token("alice")}', json={'lat': 52.0, 'lng': 4.7}).json()

    targets = client.get('/targets').json()
    assert list(targets) == ['alice']
    assert targets['alice']['lat'] == 52.0
    assert targets['alice']['fakeHash'] == second['fakeHash']
    assert targets['alice']['fakeHash'] != first['fakeHash']


def test_post_target_requires_coordinates(client: TestClient):
    resp = client.post(f'/target/{token("alice")}', json={'lat': 51.0})
    assert resp.status_code == 422


def test_post_target_out_of_range(client: TestClient):
    resp = client.post(f'/target/{token("alice")}', json={'lat': 91.0, 'lng': 3.7})
    assert resp.status_code == 422


def test_post_target_invalid_id(client: TestClient):
    resp = client.post('/target/!!!', json={'lat': 51.0, 'lng': 3.7})
    assert resp.status_code == 400


# ── GET /targets ─────────────────────────────────────────────────────────────


def test_get_targets_empty_is_object(client: TestClient):
    resp = client.get('/targets')
    assert resp.status_code == 200
    assert resp.json() == {}


def test_get_targets(client: TestClient, session: Session):
    create_target(session, 'alice', fake_hash='AAAA1111')
    create_target(session, 'bob', fake_hash='BBBB2222')

    data = client.get('/targets').json()
    assert data['alice']['fakeHash'] == 'AAAA1111'
    assert data['bob']['fakeHash'] == 'BBBB2222'
