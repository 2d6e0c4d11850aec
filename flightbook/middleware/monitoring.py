"""Monitoring and metrics middleware using Prometheus."""
import logging
import time
from functools import wraps
from typing import Callable
from flask import request
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from prometheus_client import make_wsgi_app
from werkzeug.middleware.dispatcher import DispatcherMiddleware

logger = logging.getLogger(__name__)

# Prometheus metrics
flights_requests_total = Counter(
    'flights_http_requests_total',
    'Total number of Flights API requests',
    ['method', 'endpoint', 'status']
)

flights_request_duration = Histogram(
    'flights_http_request_duration_seconds',
    'Time spent processing Flights API requests',
    ['endpoint'],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5]
)


def register_metrics_middleware(app) -> None:
    """
    Register Prometheus metrics middleware.

    Args:
        app: Flask application instance
    """
    if not app.config.get("ENABLE_METRICS"):
        return

    # Add metrics endpoint
    @app.route('/metrics')
    def metrics():
        """Prometheus metrics endpoint."""
        return generate_latest(), 200, {'Content-Type': CONTENT_TYPE_LATEST}

    # Wrap app with Prometheus WSGI middleware
    app.wsgi_app = DispatcherMiddleware(app.wsgi_app, {
        '/metrics': make_wsgi_app()
    })

    logger.info("Prometheus metrics enabled at /metrics")


def _status_of(response) -> int:
    if isinstance(response, tuple):
        return response[1]
    return getattr(response, "status_code", 200)


def track_flight_request(endpoint: str):
    """
    Decorator to track Flights API request metrics.

    Args:
        endpoint: Endpoint name for metrics
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def wrapper(*args, **kwargs):
            start_time = time.time()

            try:
                response = f(*args, **kwargs)
            except Exception:
                flights_requests_total.labels(
                    method=request.method,
                    endpoint=endpoint,
                    status=500
                ).inc()
                raise

            flights_requests_total.labels(
                method=request.method,
                endpoint=endpoint,
                status=_status_of(response)
            ).inc()
            flights_request_duration.labels(endpoint=endpoint).observe(
                time.time() - start_time
            )
            return response

        return wrapper
    return decorator
