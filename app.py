import logging

from flask import Flask
from config import Config
from services.cache import GeoCache
from services.geo import GeoService

# Import blueprints
from routes.ip import ip_bp

logger = logging.getLogger(__name__)


def configure_logging(level=None):
    """Configure root logging once for the process"""
    logging.basicConfig(
        level=level or Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def create_app(geo_service=None):
    """
    Application factory

    Args:
        geo_service: GeoService to answer /json lookups. When omitted, one is
            built around a fresh GeoCache that lives as long as the app.
    """
    app = Flask(__name__)

    # Load configuration
    app.config['DEBUG'] = Config.DEBUG

    # Keep ipinfo.io field order in JSON responses
    app.json.sort_keys = False

    if geo_service is None:
        geo_service = GeoService(cache=GeoCache())
    app.extensions['geo_service'] = geo_service

    # Register blueprints
    app.register_blueprint(ip_bp)

    return app


def main():
    configure_logging()
    app = create_app()
    logger.info("IP service listening on %s", Config.listen_address())
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, threaded=True)


if __name__ == '__main__':
    main()
