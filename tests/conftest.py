import socket

import dpkt
import pytest


def tcp_frame(src_ip, dst_ip, sport, dport, flags):
    eth = dpkt.ethernet.Ethernet()
    eth.src = b"\x00\x01\x02\x03\x04\x05"
    eth.dst = b"\x06\x07\x08\x09\x0a\x0b"
    eth.type = dpkt.ethernet.ETH_TYPE_IP

    ip = dpkt.ip.IP()
    ip.v = 4
    ip.p = dpkt.ip.IP_PROTO_TCP
    ip.src = socket.inet_aton(src_ip)
    ip.dst = socket.inet_aton(dst_ip)

    tcp = dpkt.tcp.TCP()
    tcp.sport = sport
    tcp.dport = dport
    tcp.flags = flags
    tcp.off = 5

    ip.data = tcp
    eth.data = ip
    return bytes(eth)


@pytest.fixture
def syn_frame():
    return tcp_frame("192.0.2.1", "198.51.100.2", 12345, 80, dpkt.tcp.TH_SYN)


@pytest.fixture
def handshake_pcap(tmp_path):
    """A pcap holding a SYN, its SYN/ACK and one undecodable frame."""
    path = tmp_path / "handshake.pcap"
    with open(path, "wb") as fh:
        writer = dpkt.pcap.Writer(fh)
        writer.writepkt(tcp_frame("192.0.2.1", "198.51.100.2", 12345, 80, dpkt.tcp.TH_SYN), ts=1.0)
        writer.writepkt(tcp_frame("198.51.100.2", "192.0.2.1", 80, 12345, dpkt.tcp.TH_SYN | dpkt.tcp.TH_ACK), ts=1.5)
        writer.writepkt(b"\xff" * 10, ts=2.0)
        writer.close()
    return path
