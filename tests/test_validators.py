"""
Tests for IP parsing and family checks.
"""

import ipaddress

from utils.validators import parse_ip


class TestParseIp:
    def test_ipv4(self):
        assert parse_ip("8.8.8.8") == ipaddress.IPv4Address("8.8.8.8")

    def test_ipv6_is_canonicalized(self):
        assert str(parse_ip("2001:DB8:0:0::1")) == "2001:db8::1"

    def test_mapped_ipv6_becomes_ipv4(self):
        assert parse_ip("::FFFF:8.8.8.8") == ipaddress.IPv4Address("8.8.8.8")

    def test_zone_is_rejected(self):
        assert parse_ip("fe80::1%eth0") is None

    def test_garbage(self):
        assert parse_ip("256.1.1.1") is None
        assert parse_ip("") is None
        assert parse_ip(None) is None

    def test_families(self):
        assert isinstance(parse_ip("192.0.2.1"), ipaddress.IPv4Address)
        assert isinstance(parse_ip("2001:db8::1"), ipaddress.IPv6Address)
