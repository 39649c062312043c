"""Versioned text rendering of a Community ID digest."""
from __future__ import annotations

import base64
import enum

VERSION_PREFIX = "1:"


class Encoding(enum.Enum):
    BASE64 = "base64"
    HEX = "hex"


def encode(digest: bytes, encoding: Encoding = Encoding.BASE64) -> str:
    if encoding is Encoding.BASE64:
        body = base64.b64encode(digest).decode("ascii")
    elif encoding is Encoding.HEX:
        body = digest.hex()
    else:
        raise ValueError(f"unknown encoding: {encoding!r}")
    return VERSION_PREFIX + body


def decode(community_id: str) -> bytes:
    """Recover the raw digest from an identifier in either encoding.

    The body length tells the encodings apart: 40 characters for hex, 28 for
    padded base64 of a 20-byte SHA-1.
    """
    if not community_id.startswith(VERSION_PREFIX):
        raise ValueError(f"unsupported Community ID version: {community_id!r}")
    body = community_id[len(VERSION_PREFIX):]
    if len(body) == 40:
        return bytes.fromhex(body)
    return base64.b64decode(body, validate=True)
