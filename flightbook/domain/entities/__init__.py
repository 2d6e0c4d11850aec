"""Domain entities - core business objects."""
from flightbook.domain.entities.flight import Flight, FlightData

__all__ = [
    "Flight",
    "FlightData",
]
