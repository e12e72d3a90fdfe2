"""
Geolocation Service Module
Handles IP geolocation lookups against ip-api.com with caching
"""

import json
import logging
import time

import requests

from config import Config
from models.geo import GeoRecord
from services.cache import GeoCache
from services.errors import NetworkError, ReadError, ParseError, ProviderError

logger = logging.getLogger(__name__)

_STRING_FIELDS = ('status', 'message', 'country', 'countryCode', 'region',
                  'regionName', 'city', 'timezone', 'isp', 'org', 'as', 'query')
_NUMBER_FIELDS = ('lat', 'lon')
_CHUNK_SIZE = 1024


class GeoService:
    """Geolocation service handler"""

    def __init__(self, cache=None, session=None, api_url=None, timeout=None):
        """
        Args:
            cache: GeoCache shared by all lookups (a new one if omitted)
            session: requests.Session used for outbound calls
            api_url: URL template with an ``{ip}`` placeholder
            timeout: Outbound request timeout in seconds
        """
        self.cache = cache if cache is not None else GeoCache()
        self.session = session or requests.Session()
        self.api_url = api_url or Config.IP_GEO_API
        self.timeout = Config.GEO_TIMEOUT if timeout is None else timeout

    def lookup(self, ip):
        """
        Lookup geolocation information for IP address
        Uses cache to reduce API calls

        A fresh cache entry is returned without any outbound request. On a
        miss, exactly one request is made; failures are raised and never
        cached, so the next call for the same IP tries again.

        Args:
            ip: IP address to lookup

        Returns:
            GeoRecord

        Raises:
            NetworkError: request failed or timed out
            ReadError: response body could not be read
            ParseError: body is not the expected JSON object
            ProviderError: provider reported a non-success status
        """
        # Check cache first
        cached = self.cache.get(ip)
        if cached.fresh:
            logger.debug("geo cache hit for %s", ip)
            return cached.record
        logger.debug("geo cache %s for %s", "stale" if cached.found else "miss", ip)

        data = self._fetch(ip)

        if data['status'] != "success":
            raise ProviderError(ip, data['status'], data['message'])

        record = GeoRecord(
            ip=ip,
            city=data['city'],
            region=data['regionName'],
            country=data['countryCode'],
            loc=f"{data['lat']:.4f},{data['lon']:.4f}",
            org=data['as'],
            timezone=data['timezone'],
        )

        # Store in cache
        self.cache.put(ip, record)
        return record

    def _fetch(self, ip):
        """
        Fetch and decode the provider document for ip

        The whole exchange is bounded by self.timeout: the body is read in
        chunks and abandoned once the deadline passes, so a provider that
        drips bytes cannot hold the caller longer than the timeout.
        """
        url = self.api_url.format(ip=ip)
        deadline = time.monotonic() + self.timeout
        try:
            response = self.session.get(url, timeout=self.timeout, stream=True)
        except requests.RequestException as e:
            raise NetworkError(ip, str(e)) from e

        chunks = []
        try:
            for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                if time.monotonic() > deadline:
                    raise NetworkError(ip, f"timed out after {self.timeout}s reading response")
                chunks.append(chunk)
        except (requests.RequestException, OSError) as e:
            raise ReadError(ip, str(e)) from e
        finally:
            response.close()
        body = b"".join(chunks)

        try:
            payload = json.loads(body)
        except (ValueError, TypeError) as e:
            raise ParseError(ip, f"invalid JSON: {e}") from e

        # a bare JSON null carries no status, so it fails as a provider
        # error with an empty status rather than as a parse error
        if payload is None:
            payload = {}

        return _decode(ip, payload)


def _decode(ip, payload):
    """Check field types of a provider payload, filling absent fields"""
    if not isinstance(payload, dict):
        raise ParseError(ip, f"expected a JSON object, got {type(payload).__name__}")

    data = {}
    for name in _STRING_FIELDS:
        value = payload.get(name)
        if value is None:
            value = ""
        elif not isinstance(value, str):
            raise ParseError(ip, f"field {name!r} is not a string")
        data[name] = value

    for name in _NUMBER_FIELDS:
        value = payload.get(name)
        if value is None:
            value = 0.0
        elif isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ParseError(ip, f"field {name!r} is not a number")
        data[name] = float(value)

    return data
