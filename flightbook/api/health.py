"""Health check endpoints."""
import logging
from flask import Blueprint, jsonify, current_app

health_blueprint = Blueprint("health", __name__)
_logger = logging.getLogger(__name__)


@health_blueprint.route("/health", methods=["GET"])
def health_check():
    """
    Basic health check endpoint.

    Returns:
        JSON response with health status
    """
    return jsonify({
        "status": "healthy",
        "service": "flights-api"
    }), 200


@health_blueprint.route("/health/ready", methods=["GET"])
def readiness_check():
    """
    Readiness check endpoint (checks the flight store).

    Returns:
        JSON response with readiness status
    """
    checks = {
        "flight_store": False,
        "overall": False
    }

    try:
        container = current_app.config.get('service_container')
        checks["flight_store"] = bool(container and container.get_flight_repository().ping())
    except Exception as e:
        _logger.error(f"Flight store health check failed: {e}")
        checks["flight_store"] = False

    checks["overall"] = checks["flight_store"]

    status_code = 200 if checks["overall"] else 503

    return jsonify({
        "status": "ready" if checks["overall"] else "not_ready",
        "checks": checks
    }), status_code


@health_blueprint.route("/health/live", methods=["GET"])
def liveness_check():
    """
    Liveness check endpoint (for Kubernetes).

    Returns:
        JSON response with liveness status
    """
    return jsonify({
        "status": "alive",
        "service": "flights-api"
    }), 200
