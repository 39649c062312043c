"""IP protocol numbers and ICMP/ICMPv6 request/reply pairing tables.

The pairing tables let ICMP exchanges be treated like port-based flows: the
type of one side maps to the type expected from the other side.
"""
from __future__ import annotations

import typing as t

PROTO_ICMP = 1
PROTO_IP = 4
PROTO_TCP = 6
PROTO_UDP = 17
PROTO_IPV6 = 41
PROTO_ICMPV6 = 58
PROTO_SCTP = 132

PROTO_NAMES = {
    "icmp": PROTO_ICMP,
    "icmp6": PROTO_ICMPV6,
    "tcp": PROTO_TCP,
    "udp": PROTO_UDP,
    "sctp": PROTO_SCTP,
}

# protocols whose headers carry real 16-bit source/destination ports
PORT_PROTOCOLS = frozenset({PROTO_TCP, PROTO_UDP, PROTO_SCTP})

ICMP_ECHO_REPLY = 0
ICMP_ECHO = 8
ICMP_RTR_ADVERT = 9
ICMP_RTR_SOLICIT = 10
ICMP_TSTAMP = 13
ICMP_TSTAMP_REPLY = 14
ICMP_INFO = 15
ICMP_INFO_REPLY = 16
ICMP_MASK = 17
ICMP_MASK_REPLY = 18

ICMPV6_ECHO_REQUEST = 128
ICMPV6_ECHO_REPLY = 129
ICMPV6_MLD_LISTENER_QUERY = 130
ICMPV6_MLD_LISTENER_REPORT = 131
ICMPV6_ND_ROUTER_SOLICIT = 133
ICMPV6_ND_ROUTER_ADVERT = 134
ICMPV6_ND_NEIGHBOR_SOLICIT = 135
ICMPV6_ND_NEIGHBOR_ADVERT = 136
ICMPV6_WRU_REQUEST = 139
ICMPV6_WRU_REPLY = 140
ICMPV6_HAAD_REQUEST = 144
ICMPV6_HAAD_REPLY = 145


def _symmetric(pairs: t.Iterable[tuple[int, int]]) -> dict[int, int]:
    out: dict[int, int] = {}
    for a, b in pairs:
        out[a] = b
        out[b] = a
    return out


ICMP_PAIRS: t.Mapping[int, int] = _symmetric([
    (ICMP_ECHO, ICMP_ECHO_REPLY),
    (ICMP_TSTAMP, ICMP_TSTAMP_REPLY),
    (ICMP_INFO, ICMP_INFO_REPLY),
    (ICMP_RTR_SOLICIT, ICMP_RTR_ADVERT),
    (ICMP_MASK, ICMP_MASK_REPLY),
])

ICMPV6_PAIRS: t.Mapping[int, int] = _symmetric([
    (ICMPV6_ECHO_REQUEST, ICMPV6_ECHO_REPLY),
    (ICMPV6_MLD_LISTENER_QUERY, ICMPV6_MLD_LISTENER_REPORT),
    (ICMPV6_ND_ROUTER_SOLICIT, ICMPV6_ND_ROUTER_ADVERT),
    (ICMPV6_ND_NEIGHBOR_SOLICIT, ICMPV6_ND_NEIGHBOR_ADVERT),
    (ICMPV6_WRU_REQUEST, ICMPV6_WRU_REPLY),
    (ICMPV6_HAAD_REQUEST, ICMPV6_HAAD_REPLY),
])

ICMP_PAIR_TABLES: t.Mapping[int, t.Mapping[int, int]] = {
    PROTO_ICMP: ICMP_PAIRS,
    PROTO_ICMPV6: ICMPV6_PAIRS,
}


def parse_proto(value: t.Union[str, int]) -> int:
    """Return the IP protocol number for a name (``tcp``) or number (``6``).

    Raises ValueError for unknown names and numbers outside 0-255.
    """
    if isinstance(value, int):
        num = value
    else:
        key = value.strip().lower()
        if key in PROTO_NAMES:
            return PROTO_NAMES[key]
        try:
            num = int(key, 10)
        except ValueError:
            raise ValueError(f"unknown protocol: {value!r}") from None
    if not 0 <= num <= 255:
        raise ValueError(f"protocol out of range 0-255: {num}")
    return num
