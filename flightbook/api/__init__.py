"""API endpoints module.

This module contains all HTTP API endpoints organized by domain.
"""

from flightbook.api.flights import flights_blueprint
from flightbook.api.health import health_blueprint

__all__ = [
    "flights_blueprint",
    "health_blueprint",
]
