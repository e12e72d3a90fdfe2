"""
Client Address Extraction Module
Finds candidate client addresses in proxy headers and the peer address
"""

import ipaddress

from models.address import AddressCandidates
from utils.network import normalize, split_host_port
from utils.validators import parse_ip

CF_CONNECTING_IP = 'CF-Connecting-IP'
X_FORWARDED_FOR = 'X-Forwarded-For'


def _classify(raw):
    """Return (ipv4, ipv6) for a raw token; the unmatched family is empty"""
    ip = parse_ip(normalize(raw))
    if ip is None:
        return "", ""
    if isinstance(ip, ipaddress.IPv4Address):
        return str(ip), ""
    return "", str(ip)


def extract_candidates(headers, peer_address):
    """
    Extract candidate client addresses from a request

    Sources, in priority order:
    1. ``CF-Connecting-IP`` (set by the CDN)
    2. ``X-Forwarded-For``, scanned left to right until both families are
       filled; no trusted-proxy counting is done
    3. The transport peer, used only when both families are still empty

    Malformed tokens are skipped silently. Nothing here raises.

    Args:
        headers: Case-insensitive header mapping (e.g. ``request.headers``)
        peer_address: Transport peer as ``host:port``, ``[host]:port`` or a
            bare host when the server does not report the port

    Returns:
        AddressCandidates
    """
    ipv4 = ""
    ipv6 = ""
    raw_xff = headers.get(X_FORWARDED_FOR, "") or ""

    cf = headers.get(CF_CONNECTING_IP, "") or ""
    if cf:
        ipv4, ipv6 = _classify(cf)

    if raw_xff and (not ipv4 or not ipv6):
        for token in raw_xff.split(','):
            v4, v6 = _classify(token)
            if v4 and not ipv4:
                ipv4 = v4
            if v6 and not ipv6:
                ipv6 = v6
            if ipv4 and ipv6:
                break

    remote = ""
    if peer_address:
        try:
            host, _ = split_host_port(peer_address)
        except ValueError:
            host = peer_address
        remote = normalize(host)
        if not ipv4 and not ipv6:
            ipv4, ipv6 = _classify(remote)

    return AddressCandidates(
        ipv4=ipv4,
        ipv6=ipv6,
        x_forwarded_for=raw_xff,
        remote_addr=remote,
    )


def select_client_ip(candidates):
    """
    Pick the single address to report for a client

    IPv6 wins over IPv4 when both are present. The choice is a preference,
    not a trust decision: both may come from spoofable headers.

    Returns:
        Address string, or "" when none was found
    """
    return candidates.ipv6 or candidates.ipv4 or ""
