"""Packet parsing helpers: derive a FlowTuple from a raw Ethernet frame."""
from __future__ import annotations

import logging
import typing as t

import dpkt

from .flow import FlowTuple
from .protocols import PORT_PROTOCOLS, PROTO_ICMP, PROTO_ICMPV6

log = logging.getLogger(__name__)


def _ports(proto: int, l4) -> tuple[t.Optional[int], t.Optional[int]]:
    # undecoded payloads (fragments, truncated headers) come back as bytes
    if isinstance(l4, (bytes, bytearray)):
        return None, None
    if proto in PORT_PROTOCOLS:
        return getattr(l4, "sport", None), getattr(l4, "dport", None)
    if proto in (PROTO_ICMP, PROTO_ICMPV6):
        # type and code stand in for source and destination ports
        return getattr(l4, "type", None), getattr(l4, "code", None)
    return None, None


def flow_from_ip(ip) -> t.Optional[FlowTuple]:
    """Build a FlowTuple from a decoded dpkt IP or IP6 packet."""
    # dpkt's IPv4 uses `p` for protocol, some IPv6 versions only expose `nxt`.
    proto = getattr(ip, "p", getattr(ip, "nxt", None))
    if proto is None:
        return None
    sport, dport = _ports(proto, ip.data)
    if sport is None or dport is None:
        sport = dport = None
    flow = FlowTuple(proto=proto, saddr=bytes(ip.src), daddr=bytes(ip.dst), sport=sport, dport=dport)
    try:
        return flow.validate()
    except ValueError as e:
        log.debug("skipping packet: %s", e)
        return None


def flow_from_raw(raw: bytes) -> t.Optional[FlowTuple]:
    """Parse raw Ethernet bytes and return a FlowTuple or None if unsupported.

    Supports Ethernet->IPv4/IPv6->TCP/UDP/SCTP/ICMP/ICMPv6; other IP
    protocols produce a tuple without ports. Returns None for non-IP or
    malformed frames.
    """
    try:
        eth = dpkt.ethernet.Ethernet(raw)
    except (dpkt.UnpackError, ValueError):
        return None

    if not isinstance(eth.data, (dpkt.ip.IP, dpkt.ip6.IP6)):
        return None
    return flow_from_ip(eth.data)
