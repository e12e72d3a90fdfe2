"""
Service Errors Module
Failure taxonomy for address resolution and geo enrichment
"""


class AddressUndeterminable(Exception):
    """No valid client address could be found in the request"""


class GeoLookupError(Exception):
    """Base class for geolocation enrichment failures"""

    def __init__(self, ip, message):
        super().__init__(f"geo lookup for {ip} failed: {message}")
        self.ip = ip


class NetworkError(GeoLookupError):
    """The outbound request errored or timed out"""


class ReadError(GeoLookupError):
    """The provider response body could not be read"""


class ParseError(GeoLookupError):
    """The provider response was not the expected JSON document"""


class ProviderError(GeoLookupError):
    """The provider answered with a non-success status"""

    def __init__(self, ip, status, message=""):
        detail = f"status={status}"
        if message:
            detail += f" ({message})"
        super().__init__(ip, detail)
        self.status = status
        self.provider_message = message
