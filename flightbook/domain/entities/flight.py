"""Flight domain entities."""
import math
from dataclasses import dataclass
from typing import Any, Dict


def _require_text(payload: Dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{key} is required")
    return value


def _require_price(payload: Dict[str, Any]) -> float:
    value = payload.get("price")
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("price must be a number")
    try:
        return float(value)
    except OverflowError:
        raise ValueError("price must be a number") from None


@dataclass
class FlightData:
    """Flight fields supplied by a client, i.e. a flight without its id."""

    origin: str
    destination: str
    departure_time: str
    arrival_time: str
    price: float

    def __post_init__(self):
        """Validate flight data."""
        if not self.origin:
            raise ValueError("origin is required")
        if not self.destination:
            raise ValueError("destination is required")
        if not self.departure_time:
            raise ValueError("departureTime is required")
        if not self.arrival_time:
            raise ValueError("arrivalTime is required")
        if not math.isfinite(self.price) or self.price < 0:
            raise ValueError("price must be non-negative")

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "FlightData":
        """
        Build flight data from a camelCase JSON payload.

        Unknown keys (including a client-supplied ``id``) are ignored.

        Raises:
            ValueError: If the payload is not an object or a field is invalid
        """
        if not isinstance(payload, dict):
            raise ValueError("Flight payload must be a JSON object")
        return cls(
            origin=_require_text(payload, "origin"),
            destination=_require_text(payload, "destination"),
            departure_time=_require_text(payload, "departureTime"),
            arrival_time=_require_text(payload, "arrivalTime"),
            price=_require_price(payload),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "origin": self.origin,
            "destination": self.destination,
            "departureTime": self.departure_time,
            "arrivalTime": self.arrival_time,
            "price": self.price,
        }


@dataclass
class Flight:
    """Domain entity representing a stored flight record."""

    id: str
    origin: str
    destination: str
    departure_time: str
    arrival_time: str
    price: float

    def __post_init__(self):
        """Validate flight entity."""
        if not self.id:
            raise ValueError("id is required")

    @classmethod
    def from_data(cls, flight_id: str, data: FlightData) -> "Flight":
        """Attach an id to client-supplied flight data."""
        return cls(
            id=flight_id,
            origin=data.origin,
            destination=data.destination,
            departure_time=data.departure_time,
            arrival_time=data.arrival_time,
            price=data.price,
        )

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Flight":
        """
        Build a flight from its camelCase JSON representation.

        Raises:
            ValueError: If the payload is missing an id or a required field
        """
        if not isinstance(payload, dict):
            raise ValueError("Flight record must be a JSON object")
        flight_id = payload.get("id")
        if flight_id is None:
            raise ValueError("id is required")
        return cls.from_data(str(flight_id), FlightData.from_dict(payload))

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Flight":
        """
        Rebuild a stored flight without validating its fields.

        Records written before body validation existed may hold empty strings
        or a null price; they are loaded as they are.

        Raises:
            ValueError: If the record is not an object or has no id
        """
        if not isinstance(record, dict) or record.get("id") in (None, ""):
            raise ValueError("Flight record must be a JSON object with an id")
        return cls(
            id=str(record["id"]),
            origin=record.get("origin"),
            destination=record.get("destination"),
            departure_time=record.get("departureTime"),
            arrival_time=record.get("arrivalTime"),
            price=record.get("price"),
        )

    def data(self) -> FlightData:
        """Return the flight's fields without its id."""
        return FlightData(
            origin=self.origin,
            destination=self.destination,
            departure_time=self.departure_time,
            arrival_time=self.arrival_time,
            price=self.price,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "origin": self.origin,
            "destination": self.destination,
            "departureTime": self.departure_time,
            "arrivalTime": self.arrival_time,
            "price": self.price,
        }
