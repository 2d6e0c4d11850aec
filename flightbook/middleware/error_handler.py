"""Error handling middleware with Sentry integration."""
import logging
import os
from flask import jsonify

logger = logging.getLogger(__name__)


def _init_sentry(app) -> None:
    import sentry_sdk
    from sentry_sdk.integrations.flask import FlaskIntegration

    sentry_sdk.init(
        dsn=app.config["SENTRY_DSN"],
        integrations=[FlaskIntegration()],
        traces_sample_rate=0.1,
        environment=os.getenv("FLASK_ENV", "production"),
    )
    logger.info("Sentry error tracking initialized")


def init_error_handlers(app) -> None:
    """
    Initialize error handlers for the application.

    Every error response is a JSON body with a ``message`` key; internal
    details are logged, never returned.

    Args:
        app: Flask application instance
    """
    if app.config.get("SENTRY_DSN"):
        _init_sentry(app)

    @app.errorhandler(400)
    def bad_request(error):
        """Handle 400 errors."""
        return jsonify({"message": "Bad request"}), 400

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({"message": "Resource not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        """Handle 405 errors."""
        return jsonify({"message": "Method not allowed"}), 405

    @app.errorhandler(429)
    def rate_limit_error(error):
        """Handle rate limit errors."""
        return jsonify({"message": "Rate limit exceeded. Please try again later."}), 429

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        logger.error(f"Internal server error: {error}", exc_info=True)
        return jsonify({"message": "Internal server error"}), 500
