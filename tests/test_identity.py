from __future__ import annotations

import string

import pytest
from fastapi.testclient import TestClient

from droppydrop.identity import IdentityCodec, InvalidObfuscatedIdError

# ── IdentityCodec ────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    'name',
    ['alice', 'Team Blue 3', 'x', string.printable, 'a' * 100, 'Zoë', '李雷'],
)
def test_round_trip(codec: IdentityCodec, name: str):
    assert codec.deobfuscate(codec.obfuscate(name)) == name


def test_round_trip_every_printable_character(codec: IdentityCodec):
    for ch in string.printable:
        assert codec.deobfuscate(codec.obfuscate(ch)) == ch


def test_obfuscate_is_deterministic(codec: IdentityCodec):
    assert codec.obfuscate('alice') == codec.obfuscate('alice')
    assert codec.obfuscate('alice') != codec.obfuscate('bob')


def test_token_is_url_safe(codec: IdentityCodec):
    tok = codec.obfuscate(string.printable)
    assert set(tok) <= set(string.ascii_letters + string.digits + '-_=')
    assert 'alice' not in codec.obfuscate('alice')


def test_different_keys_give_different_tokens():
    assert IdentityCodec('key-one').obfuscate('alice') != IdentityCodec('key-two').obfuscate('alice')


@pytest.mark.parametrize('bad', ['not base64!', 'abc', '@@@@', '', '+AAA', 'AA/A', 'Zoë='])
def test_deobfuscate_rejects_invalid_tokens(codec: IdentityCodec, bad: str):
    with pytest.raises(InvalidObfuscatedIdError):
        codec.deobfuscate(bad)


def test_deobfuscate_has_no_integrity_check(codec: IdentityCodec):
    # Any well-formed base64 decodes to some name: tampered tokens are not detected.
    # 'AAAA' is three zero bytes, which XOR to the first three key bytes.
    assert codec.deobfuscate('AAAA') == 'THI'


def test_deobfuscate_garbage_bytes_does_not_raise(codec: IdentityCodec):
    # '____' is three 0xFF bytes; the result is not valid UTF-8 before replacement.
    assert isinstance(codec.deobfuscate('____'), str)


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        IdentityCodec('')


# ── POST /obfuscate-url ─────────────────────────────────────────────────────


def test_obfuscate_url(client: TestClient, codec: IdentityCodec):
    resp = client.post('/obfuscate-url', json={'playerID': 'alice'})
    assert resp.status_code == 200
    data = resp.json()
    assert data['playerID'] == 'alice'
    assert data['obfuscatedID'] == codec.obfuscate('alice')
    assert data['obfuscatedURL'] == f'https://testserver/player/{data["obfuscatedID"]}'


def test_obfuscate_url_localhost_uses_http(client: TestClient):
    resp = client.post(
        '/obfuscate-url', json={'playerID': 'alice'}, headers={'Host': 'localhost:8080'}
    )
    assert resp.status_code == 200
    assert resp.json()['obfuscatedURL'].startswith('http://localhost:8080/player/')


def test_obfuscate_url_requires_player_id(client: TestClient):
    resp = client.post('/obfuscate-url', json={})
    assert resp.status_code == 422


def test_obfuscated_id_resolves_to_player(client: TestClient):
    obfuscated = client.post('/obfuscate-url', json={'playerID': 'alice'}).json()['obfuscatedID']
    client.post(f'/locations/{obfuscated}', json={
        'lat': 10.0, 'lng': 20.0, 'status': 'OK', 'clientTimestamp': '2026-06-01T10:00:00Z',
    })
    assert list(client.get('/locations').json()) == ['alice']
