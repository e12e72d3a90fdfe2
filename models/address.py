"""
Address Candidates Model
Per-request view of the addresses a client could be reached at
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AddressCandidates:
    """
    Candidate client addresses found in one request.

    Attributes:
        ipv4: Best IPv4 address, canonical form, or ""
        ipv6: Best IPv6 address, canonical form, or ""
        x_forwarded_for: Raw X-Forwarded-For header value, unparsed
        remote_addr: Normalized transport peer host (diagnostic only)
    """
    ipv4: str = ""
    ipv6: str = ""
    x_forwarded_for: str = ""
    remote_addr: str = ""
