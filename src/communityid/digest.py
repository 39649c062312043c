"""SHA-1 over the fixed-order byte serialization of a normalized tuple.

Field order is part of the Community ID v1 wire format:

    seed (2, BE) | saddr | daddr | proto (1) | pad (1, zero) | sport (2, BE) | dport (2, BE)

The two port fields are left out entirely for tuples without ports.
"""
from __future__ import annotations

import hashlib
import logging
import struct

from .errors import ConfigError, DigestError
from .normalize import Normalized

log = logging.getLogger(__name__)

SHA1_LEN = 20
PADDING = b"\x00"


def check_seed(seed) -> int:
    if not isinstance(seed, int) or not 0 <= seed <= 0xFFFF:
        raise ConfigError(f"seed must be 0-65535, got {seed!r}")
    return seed


def _fields(normalized: Normalized, seed: int):
    flow = normalized.flow
    yield "seed", struct.pack("!H", seed)
    yield "saddr", bytes(flow.saddr)
    yield "daddr", bytes(flow.daddr)
    yield "proto", struct.pack("!B", flow.proto)
    yield "padding", PADDING
    if flow.has_ports:
        yield "sport", struct.pack("!H", flow.sport)
        yield "dport", struct.pack("!H", flow.dport)


def digest_input(normalized: Normalized, seed: int = 0) -> bytes:
    """Return the exact byte stream fed to SHA-1."""
    check_seed(seed)
    return b"".join(v for _, v in _fields(normalized, seed))


def sha1_digest(normalized: Normalized, seed: int = 0) -> bytes:
    """Hash a normalized tuple and return the 20-byte digest."""
    check_seed(seed)
    try:
        sha1 = hashlib.sha1()
    except ValueError as e:
        # e.g. FIPS-restricted OpenSSL builds
        raise DigestError(f"SHA-1 unavailable: {e}") from e
    debug = log.isEnabledFor(logging.DEBUG)
    for name, value in _fields(normalized, seed):
        if debug:
            log.debug("%s: %s", name, value.hex())
        sha1.update(value)
    return sha1.digest()
