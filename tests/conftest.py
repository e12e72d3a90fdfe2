"""
Pytest configuration and shared fixtures for testing.
"""
import json
from unittest.mock import MagicMock

import pytest

from app import create_app
from services.cache import GeoCache
from services.geo import GeoService


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def make_response(payload=None, body=None):
    """Build a fake requests.Response carrying a JSON payload or raw bytes."""
    response = MagicMock()
    if body is None:
        body = json.dumps(payload).encode()
    response.iter_content.return_value = [body[i:i + 1024] for i in range(0, len(body), 1024)]
    return response


SUCCESS_PAYLOAD = {
    "status": "success",
    "country": "United States",
    "countryCode": "US",
    "regionName": "California",
    "city": "Mountain View",
    "lat": 37.4056,
    "lon": -122.0775,
    "timezone": "America/Los_Angeles",
    "isp": "Google LLC",
    "org": "Google Public DNS",
    "as": "AS15169 Google LLC",
    "query": "8.8.8.8",
}


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return GeoCache(clock=clock)


@pytest.fixture
def session():
    session = MagicMock()
    session.get.return_value = make_response(SUCCESS_PAYLOAD)
    return session


@pytest.fixture
def geo_service(cache, session):
    return GeoService(cache=cache, session=session, api_url="http://geo.test/json/{ip}", timeout=3)


@pytest.fixture
def app(geo_service):
    app = create_app(geo_service=geo_service)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
