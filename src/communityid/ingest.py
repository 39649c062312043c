"""PCAP and PCAPNG streaming ingestion utilities.

Provides a streaming iterator that yields timestamp and raw packet bytes.
Uses dpkt for pcap, and python-pcapng (falling back to dpkt) for pcapng.
"""
from __future__ import annotations

import logging
import struct
import typing as t

import dpkt
from pcapng import FileScanner
from pcapng.exceptions import PcapngException

log = logging.getLogger(__name__)

PCAPNG_MAGIC = b"\x0a\x0d\x0d\x0a"


def _iter_pcap(fh) -> t.Iterator[tuple[float, bytes]]:
    for ts, buf in dpkt.pcap.Reader(fh):
        yield float(ts), bytes(buf)


def _iter_pcapng(fh) -> t.Iterator[tuple[float, bytes]]:
    for block in FileScanner(fh):
        data = getattr(block, "packet_data", None)
        if data is None:
            continue
        # simple packet blocks carry no timestamp
        ts = getattr(block, "timestamp", None)
        yield float(ts or 0.0), bytes(data)


def _iter_pcapng_with_dpkt(fh) -> t.Iterator[tuple[float, bytes]]:
    for ts, buf in dpkt.pcapng.Reader(fh):
        yield float(ts), bytes(buf)


def _iter_file(path: str) -> t.Iterator[tuple[float, bytes]]:
    with open(path, "rb") as fh:
        magic = fh.read(4)
        fh.seek(0)
        if magic != PCAPNG_MAGIC:
            log.debug("reading %s as pcap", path)
            yield from _iter_pcap(fh)
            return
        log.debug("reading %s as pcapng", path)
        count = 0
        try:
            for pkt in _iter_pcapng(fh):
                count += 1
                yield pkt
        except (PcapngException, struct.error) as e:
            # python-pcapng rejects some section options dpkt accepts;
            # only retry when nothing has been emitted yet
            if count:
                raise
            log.warning("pcapng scanner failed on %s (%s), retrying with dpkt", path, e)
            fh.seek(0)
            yield from _iter_pcapng_with_dpkt(fh)


def iter_packets(path: str) -> t.Iterator[tuple[float, bytes]]:
    """Yield (ts, raw_bytes) for packets in a pcap or pcapng file.

    The format is picked from the file's magic number rather than its
    extension. This is streaming and does not load the file in memory.
    Empty, truncated or corrupt captures raise ValueError; packets read
    before the damage has been found are still yielded.
    """
    try:
        yield from _iter_file(path)
    except (dpkt.UnpackError, PcapngException, struct.error) as e:
        raise ValueError(f"malformed capture file: {e}") from e
