"""
Validation Utilities Module
Address parsing and family checks for the IP echo service
"""

import ipaddress


def parse_ip(address):
    """
    Parse an IP address string into an ipaddress object

    Used to classify candidate addresses by family.

    IPv4-mapped IPv6 addresses (``::ffff:a.b.c.d`` in any letter case) are
    unwrapped to their IPv4 form.

    Args:
        address: String to parse

    Returns:
        IPv4Address / IPv6Address, or None if the string is not an address

    Example:
        >>> parse_ip("8.8.8.8")
        IPv4Address('8.8.8.8')
        >>> parse_ip("::FFFF:8.8.8.8")
        IPv4Address('8.8.8.8')
        >>> parse_ip("fe80::1%eth0") is None
        True
    """
    if not address or not isinstance(address, str):
        return None

    # zone ids are stripped by normalize(); anything left here is malformed
    if '%' in address:
        return None

    try:
        ip = ipaddress.ip_address(address)
    except ValueError:
        return None

    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        return ip.ipv4_mapped
    return ip
