"""Command-line Community ID calculator."""
from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .core import CommunityIDError, Config, compute
from .encoding import Encoding
from .flow import FlowTuple
from .logging_config import setup_logging

DESCRIPTION = """\
Community ID calculator

This calculator prints the Community ID value for a given tuple
to stdout. It supports the following format for the tuple:

  [protocol] [src address] [dst address] [src port] [dst port]

The protocol is either a numeric IP protocol number, or one of
the constants "icmp", "icmp6", "tcp", "udp", or "sctp". Ports may
be left out for protocols that have none.
"""


class _Parser(argparse.ArgumentParser):
    # malformed input exits 1, not argparse's default 2
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _seed(value: str) -> int:
    try:
        seed = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid seed: {value!r}") from None
    if not 0 <= seed <= 0xFFFF:
        raise argparse.ArgumentTypeError(f"seed must be 0-65535, got {seed}")
    return seed


def build_parser():
    p = _Parser(
        prog="community-id",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("flowtuple", nargs="*", help="Flow tuple, in the above order")
    p.add_argument("--seed", type=_seed, default=0, metavar="NUM", help="Seed value for hash operations")
    p.add_argument("--no-base64", action="store_true", help="Don't base64-encode the SHA1 binary value")
    p.add_argument("--pcap", metavar="FILE", help="Print a Community ID for every IP packet in a pcap/pcapng file")
    p.add_argument("--log", default="WARNING", help="Log level")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _run_pcap(path: str, config: Config, log: logging.Logger) -> int:
    from .ingest import iter_packets
    from .packet import flow_from_raw

    total = skipped = 0
    for ts, raw in iter_packets(path):
        total += 1
        flow = flow_from_raw(raw)
        if flow is None:
            skipped += 1
            continue
        print(f"{ts:.6f} {compute(flow, config)}")
    log.info("%s: %d packets, %d skipped", path, total, skipped)
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log)
    log = logging.getLogger("communityid.cli")

    encoding = Encoding.HEX if args.no_base64 else Encoding.BASE64
    config = Config(seed=args.seed, encoding=encoding)

    if args.pcap:
        if args.flowtuple:
            parser.error("--pcap cannot be combined with a flow tuple")
        try:
            return _run_pcap(args.pcap, config, log)
        except (OSError, ValueError) as e:
            print(f"community-id: {args.pcap}: {e}", file=sys.stderr)
            return 1

    if len(args.flowtuple) not in (3, 5):
        print("Please provide full flow tuple arguments.\n", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    try:
        flow = FlowTuple.from_strings(*args.flowtuple)
        cid = compute(flow, config)
    except CommunityIDError as e:
        log.debug("computation failed for %s", args.flowtuple, exc_info=True)
        print(f"community-id: {e}", file=sys.stderr)
        return 1

    print(cid)
    return 0


if __name__ == "__main__":
    sys.exit(main())
