"""Rate limiting middleware using Flask-Limiter."""
import logging
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address


def _default_limits(app) -> list[str]:
    raw = app.config.get("RATELIMIT_DEFAULT", "")
    return [limit.strip() for limit in raw.split(";") if limit.strip()]


def create_rate_limiter(app) -> Limiter:
    """
    Create and configure Flask-Limiter instance.

    Args:
        app: Flask application instance

    Returns:
        Configured Limiter instance
    """
    if not app.config.get("RATELIMIT_ENABLED"):
        # No-op limiter if rate limiting is disabled
        return Limiter(
            get_remote_address,
            app=app,
            default_limits=[],
            storage_uri="memory://"
        )

    storage_uri = app.config.get("RATELIMIT_STORAGE_URI") or "memory://"
    try:
        return Limiter(
            get_remote_address,
            app=app,
            default_limits=_default_limits(app),
            storage_uri=storage_uri,
            strategy="fixed-window",
            headers_enabled=True
        )
    except Exception as e:
        logging.warning(f"Failed to initialize rate limiter with {storage_uri}: {e}, using memory storage")
        return Limiter(
            get_remote_address,
            app=app,
            default_limits=_default_limits(app),
            storage_uri="memory://"
        )
