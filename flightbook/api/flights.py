"""Flights REST endpoints."""
import logging
from typing import Tuple

from flask import Blueprint, Response, request, jsonify, current_app

from flightbook.domain.entities.flight import FlightData
from flightbook.domain.interfaces.flight_repository import IFlightRepository
from flightbook.middleware.monitoring import track_flight_request


flights_blueprint = Blueprint("flights", __name__, url_prefix="/flights")
_logger = logging.getLogger(__name__)

NOT_FOUND = {"message": "Flight not found"}
INTERNAL_ERROR = {"message": "Internal server error"}


def _get_repository() -> IFlightRepository:
    """
    Get flight repository from service container.

    Raises:
        RuntimeError: If service container is not available
    """
    container = current_app.config.get('service_container')
    if not container:
        raise RuntimeError("Service container not available")
    return container.get_flight_repository()


def _parse_flight_data() -> FlightData:
    """
    Parse the request body into flight data.

    Raises:
        ValueError: If the body is missing, not JSON or fails validation
    """
    body = request.get_json(silent=True)
    if body is None:
        raise ValueError("Request body must be a JSON object")
    return FlightData.from_dict(body)


@flights_blueprint.route("", methods=["GET"])
@track_flight_request("list_flights")
def list_flights() -> Tuple[Response, int]:
    """Return every flight (possibly an empty list)."""
    try:
        flights = _get_repository().find_all()
        return jsonify([flight.to_dict() for flight in flights]), 200
    except Exception as e:
        _logger.error(f"Error fetching flights: {e}", exc_info=True)
        return jsonify(INTERNAL_ERROR), 500


@flights_blueprint.route("/<flight_id>", methods=["GET"])
@track_flight_request("get_flight")
def get_flight(flight_id: str) -> Tuple[Response, int]:
    """Return a single flight or 404."""
    try:
        flight = _get_repository().find_by_id(flight_id)
        if flight is None:
            return jsonify(NOT_FOUND), 404
        return jsonify(flight.to_dict()), 200
    except Exception as e:
        _logger.error(f"Error fetching flight {flight_id}: {e}", exc_info=True)
        return jsonify(INTERNAL_ERROR), 500


@flights_blueprint.route("", methods=["POST"])
@track_flight_request("create_flight")
def create_flight() -> Tuple[Response, int]:
    """
    Create a flight.

    Expected payload:
    {
        "origin": "NYC",
        "destination": "LAX",
        "departureTime": "2023-05-15T08:00:00Z",
        "arrivalTime": "2023-05-15T11:00:00Z",
        "price": 299.99
    }

    Returns:
        201 with the created flight (including its generated id)
    """
    try:
        data = _parse_flight_data()
    except ValueError as e:
        return jsonify({"message": str(e)}), 400

    try:
        new_flight = _get_repository().create(data)
        if new_flight is None:
            return jsonify({"message": "Failed to create flight"}), 500
        return jsonify(new_flight.to_dict()), 201
    except Exception as e:
        _logger.error(f"Error creating flight: {e}", exc_info=True)
        return jsonify(INTERNAL_ERROR), 500


@flights_blueprint.route("/<flight_id>", methods=["PUT"])
@track_flight_request("update_flight")
def update_flight(flight_id: str) -> Tuple[Response, int]:
    """Replace every field of a flight except its id."""
    try:
        data = _parse_flight_data()
    except ValueError as e:
        return jsonify({"message": str(e)}), 400

    try:
        updated_flight = _get_repository().update(flight_id, data)
        if updated_flight is None:
            return jsonify(NOT_FOUND), 404
        return jsonify(updated_flight.to_dict()), 200
    except Exception as e:
        _logger.error(f"Error updating flight {flight_id}: {e}", exc_info=True)
        return jsonify(INTERNAL_ERROR), 500


@flights_blueprint.route("/<flight_id>", methods=["DELETE"])
@track_flight_request("delete_flight")
def delete_flight(flight_id: str) -> Tuple[Response, int]:
    """Delete a flight and return the removed record."""
    try:
        deleted_flight = _get_repository().delete(flight_id)
        if deleted_flight is None:
            return jsonify(NOT_FOUND), 404
        return jsonify(deleted_flight.to_dict()), 200
    except Exception as e:
        _logger.error(f"Error deleting flight {flight_id}: {e}", exc_info=True)
        return jsonify(INTERNAL_ERROR), 500
