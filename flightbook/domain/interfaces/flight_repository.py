"""Interface for flight storage (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import List, Optional

from flightbook.domain.entities.flight import Flight, FlightData


class FlightStoreError(Exception):
    """Raised when the flight store cannot safely complete a mutation."""


class IFlightRepository(ABC):
    """Interface for storing and retrieving flight records."""

    @abstractmethod
    def find_all(self) -> List[Flight]:
        """
        Retrieve every flight in storage order.

        Returns:
            List of flights (empty if storage is empty or unreadable)
        """
        pass

    @abstractmethod
    def find_by_id(self, flight_id: str) -> Optional[Flight]:
        """
        Retrieve a single flight.

        Args:
            flight_id: Flight identifier

        Returns:
            Flight or None if not found
        """
        pass

    @abstractmethod
    def create(self, data: FlightData) -> Optional[Flight]:
        """
        Store a new flight under a freshly generated id.

        Args:
            data: Flight fields without id

        Returns:
            Created flight, or None if it could not be persisted
        """
        pass

    @abstractmethod
    def update(self, flight_id: str, data: FlightData) -> Optional[Flight]:
        """
        Replace every field of an existing flight except its id.

        Args:
            flight_id: Flight identifier
            data: Replacement flight fields

        Returns:
            Updated flight or None if not found
        """
        pass

    @abstractmethod
    def delete(self, flight_id: str) -> Optional[Flight]:
        """
        Remove a flight.

        Args:
            flight_id: Flight identifier

        Returns:
            The removed flight or None if not found
        """
        pass

    @abstractmethod
    def ping(self) -> bool:
        """Check that storage is reachable and readable."""
        pass
