"""Flow tuple model: protocol, address pair and optional port pair.

Addresses are kept as raw network-byte-order bytes; ports are plain ints and
only become 16-bit big-endian values when hashed.
"""
from __future__ import annotations

import dataclasses
import ipaddress
import typing as t

from .errors import InvalidFlowError
from .protocols import parse_proto

ADDR_LENS = (4, 16)


@dataclasses.dataclass(frozen=True)
class FlowTuple:
    proto: int
    saddr: bytes
    daddr: bytes
    sport: t.Optional[int] = None
    dport: t.Optional[int] = None

    @property
    def addr_len(self) -> int:
        return len(self.saddr)

    @property
    def has_ports(self) -> bool:
        return self.sport is not None and self.dport is not None

    def validate(self) -> "FlowTuple":
        """Check every precondition and return self, or raise InvalidFlowError."""
        if not isinstance(self.proto, int) or not 0 <= self.proto <= 255:
            raise InvalidFlowError(f"protocol must be 0-255, got {self.proto!r}")
        for name, addr in (("source", self.saddr), ("destination", self.daddr)):
            if not addr:
                raise InvalidFlowError(f"{name} address is missing")
            if not isinstance(addr, (bytes, bytearray)):
                raise InvalidFlowError(f"{name} address must be bytes, got {type(addr).__name__}")
            if len(addr) not in ADDR_LENS:
                raise InvalidFlowError(f"{name} address length must be 4 or 16, got {len(addr)}")
        if len(self.saddr) != len(self.daddr):
            raise InvalidFlowError(
                f"address lengths differ: {len(self.saddr)} != {len(self.daddr)}"
            )
        if (self.sport is None) != (self.dport is None):
            raise InvalidFlowError("source and destination ports must both be given or both omitted")
        if self.has_ports:
            for name, port in (("source", self.sport), ("destination", self.dport)):
                if not isinstance(port, int) or not 0 <= port <= 0xFFFF:
                    raise InvalidFlowError(f"{name} port must be 0-65535, got {port!r}")
        return self

    @classmethod
    def from_strings(
        cls,
        proto: t.Union[str, int],
        saddr: str,
        daddr: str,
        sport: t.Union[str, int, None] = None,
        dport: t.Union[str, int, None] = None,
    ) -> "FlowTuple":
        """Build a validated tuple from textual addresses and ports.

        ``proto`` may be a protocol number or one of icmp, icmp6, tcp, udp,
        sctp. Raises InvalidFlowError on any malformed field.
        """
        try:
            proto_num = parse_proto(proto)
        except ValueError as e:
            raise InvalidFlowError(str(e)) from None
        try:
            src = ipaddress.ip_address(saddr.strip())
        except ValueError:
            raise InvalidFlowError(f"invalid source address: {saddr}") from None
        try:
            dst = ipaddress.ip_address(daddr.strip())
        except ValueError:
            raise InvalidFlowError(f"invalid destination address: {daddr}") from None
        if src.version != dst.version:
            raise InvalidFlowError("both addresses must be either IPv4 or IPv6")
        flow = cls(
            proto=proto_num,
            saddr=src.packed,
            daddr=dst.packed,
            sport=_parse_port(sport, "source"),
            dport=_parse_port(dport, "destination"),
        )
        return flow.validate()


def _parse_port(value, name: str) -> t.Optional[int]:
    if value is None:
        return None
    if isinstance(value, int):
        return value
    try:
        return int(value, 10)
    except ValueError:
        raise InvalidFlowError(f"invalid {name} port: {value}") from None
