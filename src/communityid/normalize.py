"""Canonical endpoint ordering for flow tuples.

Observers on either side of a flow must hash the same byte sequence, so the
lower (address, port) endpoint is always placed first. ICMP and ICMPv6 carry
type and code in the port slots; known request/reply types are paired so
that both halves of an exchange land on the same tuple. Unpaired ICMP types
have no reverse direction and are kept exactly as observed.
"""
from __future__ import annotations

import dataclasses
import typing as t

from .flow import FlowTuple
from .protocols import ICMP_PAIR_TABLES


@dataclasses.dataclass(frozen=True)
class Ordered:
    """Tuple in canonical order; ``flipped`` records whether a swap happened."""
    flow: FlowTuple
    flipped: bool = False


@dataclasses.dataclass(frozen=True)
class OneWay:
    """ICMP tuple without a known counterpart type, kept as given."""
    flow: FlowTuple


Normalized = t.Union[Ordered, OneWay]


def _tuple_lt(flow: FlowTuple) -> bool:
    # bytes compare unsigned, most significant byte first
    if flow.saddr != flow.daddr:
        return flow.saddr < flow.daddr
    if not flow.has_ports:
        return True
    return flow.sport < flow.dport


def _flip(flow: FlowTuple) -> FlowTuple:
    return FlowTuple(
        proto=flow.proto,
        saddr=flow.daddr,
        daddr=flow.saddr,
        sport=flow.dport,
        dport=flow.sport,
    )


def normalize(flow: FlowTuple) -> Normalized:
    """Return the canonical form of an already validated flow tuple."""
    if flow.has_ports:
        pairs = ICMP_PAIR_TABLES.get(flow.proto)
        if pairs is not None:
            counterpart = pairs.get(flow.sport)
            if counterpart is None:
                return OneWay(flow)
            flow = dataclasses.replace(flow, dport=counterpart)

    if _tuple_lt(flow):
        return Ordered(flow)
    return Ordered(_flip(flow), flipped=True)
