"""Reversible player-name obfuscation for URLs.

Names are XORed byte-wise against a repeating static key and encoded as
URL-safe base64. This keeps real names out of shared links and nothing more:
the key ships with the server and tokens carry no integrity check, so any
well-formed base64 string decodes to *some* name.
"""

from __future__ import annotations

import base64
import binascii
import re


class InvalidObfuscatedIdError(ValueError):
    """The token is not valid URL-safe base64, or decodes to an empty name."""


# URL-safe base64 alphabet only; the standard alphabet's "+" and "/" are rejected.
_TOKEN_RE = re.compile(r'[A-Za-z0-9_-]*={0,2}')


def _xor(data: bytes, key: bytes) -> bytes:
    return bytes(b ^ key[i % len(key)] for i, b in enumerate(data))


class IdentityCodec:
    def __init__(self, key: str | bytes) -> None:
        self.key = key.encode() if isinstance(key, str) else key
        if not self.key:
            raise ValueError('Obfuscation key must not be empty.')

    def obfuscate(self, name: str) -> str:
        return base64.urlsafe_b64encode(_xor(name.encode(), self.key)).decode('ascii')

    def deobfuscate(self, token: str) -> str:
        if not _TOKEN_RE.fullmatch(token):
            raise InvalidObfuscatedIdError(f'Invalid obfuscated id: {token!r}')
        try:
            decoded = base64.b64decode(token.encode('ascii'), altchars=b'-_', validate=True)
        except binascii.Error as exc:
            raise InvalidObfuscatedIdError(f'Invalid obfuscated id: {token!r}') from exc
        if not decoded:
            raise InvalidObfuscatedIdError('Obfuscated id is empty.')
        return _xor(decoded, self.key).decode('utf-8', errors='replace')
