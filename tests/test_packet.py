"""Tuple extraction from synthetic dpkt frames."""
import socket

import dpkt

from communityid import compute
from communityid.packet import flow_from_raw

REF_ID = "1:LQU9qZlK+B5F3KDmev6m5PMibrg="


def ether(ip, eth_type=dpkt.ethernet.ETH_TYPE_IP):
    eth = dpkt.ethernet.Ethernet()
    eth.src = b"\x00\x01\x02\x03\x04\x05"
    eth.dst = b"\x06\x07\x08\x09\x0a\x0b"
    eth.type = eth_type
    eth.data = ip
    return bytes(eth)


def ipv4(proto, src, dst, l4):
    ip = dpkt.ip.IP()
    ip.v = 4
    ip.p = proto
    ip.src = socket.inet_aton(src)
    ip.dst = socket.inet_aton(dst)
    ip.data = l4
    ip.len = ip.__hdr_len__ + len(bytes(l4))
    return ip


def test_tcp_frame_matches_reference():
    tcp = dpkt.tcp.TCP(sport=34855, dport=80, flags=dpkt.tcp.TH_SYN)
    raw = ether(ipv4(dpkt.ip.IP_PROTO_TCP, "128.232.110.120", "66.35.250.204", tcp))
    flow = flow_from_raw(raw)
    assert flow is not None
    assert (flow.proto, flow.sport, flow.dport) == (6, 34855, 80)
    assert compute(flow) == REF_ID


def test_udp_frame():
    udp = dpkt.udp.UDP(sport=5353, dport=53)
    flow = flow_from_raw(ether(ipv4(dpkt.ip.IP_PROTO_UDP, "192.0.2.1", "192.0.2.2", udp)))
    assert (flow.proto, flow.sport, flow.dport) == (17, 5353, 53)


def test_icmp_echo_pair_frames():
    req = dpkt.icmp.ICMP(type=8, code=0, data=dpkt.icmp.ICMP.Echo(id=1, seq=1))
    rep = dpkt.icmp.ICMP(type=0, code=0, data=dpkt.icmp.ICMP.Echo(id=1, seq=1))
    f1 = flow_from_raw(ether(ipv4(dpkt.ip.IP_PROTO_ICMP, "192.0.2.1", "192.0.2.2", req)))
    f2 = flow_from_raw(ether(ipv4(dpkt.ip.IP_PROTO_ICMP, "192.0.2.2", "192.0.2.1", rep)))
    assert (f1.sport, f1.dport) == (8, 0)
    assert compute(f1) == compute(f2)


def test_ipv6_udp_frame():
    udp = dpkt.udp.UDP(sport=1000, dport=2000)
    ip6 = dpkt.ip6.IP6(nxt=dpkt.ip.IP_PROTO_UDP, hlim=64,
                       src=socket.inet_pton(socket.AF_INET6, "2001:db8::1"),
                       dst=socket.inet_pton(socket.AF_INET6, "2001:db8::2"))
    ip6.data = udp
    ip6.plen = len(bytes(udp))
    flow = flow_from_raw(ether(ip6, dpkt.ethernet.ETH_TYPE_IP6))
    assert flow is not None
    assert flow.addr_len == 16
    assert (flow.proto, flow.sport, flow.dport) == (17, 1000, 2000)


def test_portless_protocol():
    gre = b"\x00\x00\x08\x00"
    flow = flow_from_raw(ether(ipv4(47, "192.0.2.1", "192.0.2.2", gre)))
    assert flow is not None
    assert flow.proto == 47
    assert not flow.has_ports


def test_non_ip_frame():
    arp = dpkt.arp.ARP()
    assert flow_from_raw(ether(arp, dpkt.ethernet.ETH_TYPE_ARP)) is None


def test_garbage_frame():
    assert flow_from_raw(b"\x00\x01") is None
