"""
Services package
Client address resolution and geolocation enrichment
"""

from .cache import GeoCache, CacheLookup
from .extractor import extract_candidates, select_client_ip
from .geo import GeoService
from .errors import (
    AddressUndeterminable,
    GeoLookupError,
    NetworkError,
    ReadError,
    ParseError,
    ProviderError
)

__all__ = [
    'GeoCache',
    'CacheLookup',
    'extract_candidates',
    'select_client_ip',
    'GeoService',
    'AddressUndeterminable',
    'GeoLookupError',
    'NetworkError',
    'ReadError',
    'ParseError',
    'ProviderError'
]
