"""Repository implementations (Infrastructure Layer).

Repository implementations for data persistence.
These implement domain interfaces defined in flightbook.domain.interfaces.
"""
from flightbook.infrastructure.repositories.json_flight_repository import JsonFlightRepository

__all__ = [
    "JsonFlightRepository",
]
