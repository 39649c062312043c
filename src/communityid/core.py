"""Community ID computation: validate, normalize, hash, encode."""
from __future__ import annotations

import dataclasses
import typing as t

from .digest import check_seed, sha1_digest
from .encoding import Encoding, encode
from .errors import CommunityIDError, ConfigError, DigestError, InvalidFlowError
from .flow import FlowTuple
from .normalize import normalize

__all__ = [
    "CommunityIDError",
    "Config",
    "ConfigError",
    "DigestError",
    "InvalidFlowError",
    "calc",
    "compute",
]


@dataclasses.dataclass(frozen=True)
class Config:
    seed: int = 0
    encoding: Encoding = Encoding.BASE64

    def __post_init__(self):
        check_seed(self.seed)
        if not isinstance(self.encoding, Encoding):
            raise ConfigError(f"unknown encoding: {self.encoding!r}")


DEFAULT_CONFIG = Config()


def compute(flow: FlowTuple, config: t.Optional[Config] = None) -> str:
    """Return the Community ID string for ``flow``.

    Raises InvalidFlowError if the tuple is malformed and DigestError if
    SHA-1 is unavailable. Nothing is returned on failure.
    """
    config = config or DEFAULT_CONFIG
    flow.validate()
    digest = sha1_digest(normalize(flow), config.seed)
    return encode(digest, config.encoding)


def calc(
    proto: int,
    saddr: bytes,
    daddr: bytes,
    sport: t.Optional[int] = None,
    dport: t.Optional[int] = None,
    seed: int = 0,
    encoding: Encoding = Encoding.BASE64,
) -> t.Optional[str]:
    """Result-style wrapper around compute(): the ID, or None on any failure."""
    try:
        return compute(FlowTuple(proto, saddr, daddr, sport, dport), Config(seed, encoding))
    except CommunityIDError:
        return None
