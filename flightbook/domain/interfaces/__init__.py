"""Domain interfaces following Dependency Inversion Principle."""

from flightbook.domain.interfaces.flight_repository import IFlightRepository, FlightStoreError

__all__ = [
    "IFlightRepository",
    "FlightStoreError",
]
