"""
IP Routes Module
Plain-text echo, IP detail dump and geolocation endpoints
"""

import logging

from flask import Blueprint, Response, current_app, jsonify, request

from models.geo import GeoRecord
from services.errors import AddressUndeterminable, GeoLookupError
from services.extractor import extract_candidates, select_client_ip
from utils.network import join_host_port

logger = logging.getLogger(__name__)

ip_bp = Blueprint('ip', __name__)

# every route answers any method
ALL_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


def _peer_address():
    """Transport peer as host:port, or the bare host when no port is known"""
    host = request.environ.get('REMOTE_ADDR', '') or ''
    port = request.environ.get('REMOTE_PORT')
    if host and port:
        return join_host_port(host, port)
    return host


def _candidates():
    return extract_candidates(request.headers, _peer_address())


# ============================================================================
# Echo Endpoints
# ============================================================================

@ip_bp.route('/', defaults={'path': ''}, methods=ALL_METHODS)
@ip_bp.route('/<path:path>', methods=ALL_METHODS)
def text(path):
    """
    Return the client IP as a single line of plain text

    Any path not claimed by another route lands here.

    Response:
        200 "2001:db8::1\\n"   (IPv6 preferred when present)
        204 (empty)            no address could be determined
    """
    ip = select_client_ip(_candidates())
    if not ip:
        return Response(status=204)
    return Response(ip + "\n", mimetype="text/plain")


@ip_bp.route('/ip', methods=ALL_METHODS)
def ip_details():
    """
    Return every address candidate found in the request

    Response:
        {
            "ipv4": "198.51.100.9",
            "ipv6": "",
            "x_forwarded_for": "198.51.100.9, 10.0.0.1",
            "remote_addr": "10.0.0.1",
            "ua": "curl/8.5.0"
        }
    """
    candidates = _candidates()
    return jsonify({
        "ipv4": candidates.ipv4,
        "ipv6": candidates.ipv6,
        "x_forwarded_for": candidates.x_forwarded_for,
        "remote_addr": candidates.remote_addr,
        "ua": request.headers.get('User-Agent', ''),
    })


# ============================================================================
# Geolocation Endpoint
# ============================================================================

@ip_bp.route('/json', methods=ALL_METHODS)
def geo():
    """
    Return geolocation for the client IP in ipinfo.io-compatible format

    Response:
        {
            "ip": "8.8.8.8",
            "city": "Mountain View",
            "region": "California",
            "country": "US",
            "loc": "37.4056,-122.0775",
            "org": "AS15169 Google LLC",
            "timezone": "America/Los_Angeles"
        }

    Lookup failures are logged and answered with the IP alone.
    """
    ip = select_client_ip(_candidates())
    if not ip:
        raise AddressUndeterminable()

    geo_service = current_app.extensions['geo_service']
    try:
        record = geo_service.lookup(ip)
    except GeoLookupError as e:
        logger.warning("geo lookup error for %s: %s", ip, e)
        record = GeoRecord(ip=ip)

    return jsonify(record.to_dict())


@ip_bp.app_errorhandler(AddressUndeterminable)
def address_undeterminable(_):
    return jsonify({"error": "could not determine client IP"}), 400


@ip_bp.app_errorhandler(500)
def internal_server_error(_):
    return jsonify({"error": "Internal server error."}), 500
