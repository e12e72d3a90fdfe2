"""
Geolocation Record Model
ipinfo.io-compatible geolocation shape served by /json
"""

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class GeoRecord:
    """
    Geolocation data for a single IP address.

    Instances are shared through the geo cache, so they are immutable.
    """
    ip: str
    city: str = ""
    region: str = ""
    country: str = ""
    loc: str = ""
    org: str = ""
    timezone: str = ""

    def to_dict(self):
        """Return the record as a dict in serialization order"""
        return asdict(self)
