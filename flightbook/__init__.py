"""Flask application factory for the Flights API."""
import logging
import sys
from typing import Optional

from flask import Flask, jsonify

from flightbook.config.settings import Config, get_config
from flightbook.infrastructure.service_container import ServiceContainer
from flightbook.middleware.rate_limiter import create_rate_limiter
from flightbook.middleware.monitoring import register_metrics_middleware
from flightbook.middleware.error_handler import init_error_handlers
from flightbook.api import flights_blueprint, health_blueprint


def create_app(config_class: Optional[type[Config]] = None,
               service_container: Optional[ServiceContainer] = None) -> Flask:
    """
    Create and configure Flask application with dependency injection.

    Args:
        config_class: Optional configuration class (for testing)
        service_container: Optional pre-built container (for testing)

    Returns:
        Configured Flask application
    """
    _logger = logging.getLogger(__name__)

    app = Flask(__name__)

    # Load configuration
    config = config_class or get_config()
    app.config.from_object(config)

    _configure_logging(config)

    app.register_blueprint(flights_blueprint)
    app.register_blueprint(health_blueprint)

    @app.route("/", methods=["GET"])
    def root():
        """Root endpoint."""
        return jsonify({"message": "Welcome to the Flights API"}), 200

    try:
        config.validate()
    except ValueError as e:
        _logger.warning(f"Configuration validation warning: {e}")

    _initialize_middleware(app)

    # Views reach the flight store through this container
    app.config['service_container'] = service_container or ServiceContainer(config)

    _logger.info(f"App routes registered: {[str(rule) for rule in app.url_map.iter_rules()]}")
    return app


def _configure_logging(config: type[Config]) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )


def _initialize_middleware(app: Flask) -> None:
    """
    Initialize middleware (rate limiting, monitoring, error handling).

    Args:
        app: Flask application instance
    """
    # Rate limiting
    app.config['limiter'] = create_rate_limiter(app)

    # Monitoring (Prometheus metrics)
    register_metrics_middleware(app)

    # Error handling (Sentry)
    init_error_handlers(app)
