"""
Configuration Management Module
Handles loading environment variables for the IP echo service
"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration class"""

    # Flask Configuration
    DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'

    # Server Configuration
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', 8080))

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Geolocation provider (ip-api.com, free, no key, HTTP only)
    IP_GEO_API = os.getenv(
        'IP_GEO_API',
        "http://ip-api.com/json/{ip}?fields=status,message,country,countryCode,"
        "regionName,city,lat,lon,timezone,isp,org,as,query"
    )
    GEO_TIMEOUT = float(os.getenv('GEO_TIMEOUT', 3))

    # Cached lookups stay fresh for five minutes
    GEO_CACHE_TTL = 300

    @staticmethod
    def listen_address():
        """Return the host:port string the server binds to"""
        return f"{Config.HOST}:{Config.PORT}"
