"""JSON file based flight repository (Repository Pattern)."""
import json
import logging
import os
import tempfile
import time
from threading import RLock
from typing import Callable, List, Optional

from flightbook.domain.entities.flight import Flight, FlightData
from flightbook.domain.interfaces.flight_repository import IFlightRepository, FlightStoreError


class JsonFlightRepository(IFlightRepository):
    """
    Flight repository backed by a single JSON array on disk.

    Every mutation loads the whole collection, modifies it in memory and
    rewrites the whole file. A re-entrant lock serialises these cycles within
    the process; separate processes sharing the file are not coordinated.
    """

    def __init__(
        self,
        data_dir: str,
        file_name: str = "flights.json",
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Initialize the flight repository.

        Args:
            data_dir: Directory holding the data file (created on demand)
            file_name: Name of the JSON file inside data_dir
            clock: Time source in seconds, used for id generation
        """
        self.data_dir = data_dir
        self.file_path = os.path.join(data_dir, file_name)
        self._clock = clock or time.time
        self._lock = RLock()
        self._logger = logging.getLogger(__name__)

    def _ensure_data_directory_exists(self) -> None:
        if not os.path.isdir(self.data_dir):
            os.makedirs(self.data_dir, exist_ok=True)
            self._logger.info(f"Created data directory: {self.data_dir}")

    def _read(self) -> List[Flight]:
        """
        Read the collection from disk, creating an empty file if needed.

        Raises:
            OSError: If the directory or file cannot be created or read
            ValueError: If the file does not hold a JSON array of flights
        """
        self._ensure_data_directory_exists()

        if not os.path.exists(self.file_path):
            with open(self.file_path, "w", encoding="utf-8") as f:
                f.write(json.dumps([]))
            self._logger.info(f"Created flights file: {self.file_path}")
            return []

        with open(self.file_path, "r", encoding="utf-8") as f:
            records = json.load(f)

        if not isinstance(records, list):
            raise ValueError(f"{self.file_path} does not contain a JSON array")

        flights = []
        for position, record in enumerate(records):
            try:
                flights.append(Flight.from_record(record))
            except ValueError as e:
                self._logger.warning(f"Skipping flight record #{position} in {self.file_path}: {e}")
        return flights

    def _load_for_update(self) -> List[Flight]:
        """Load the collection for a mutation, refusing to proceed on unreadable data."""
        try:
            return self._read()
        except (OSError, ValueError) as e:
            self._logger.error(f"Error reading flights data: {e}")
            raise FlightStoreError("Flight data is unreadable") from e

    def _save(self, flights: List[Flight]) -> bool:
        """
        Persist the whole collection.

        The data is written to a temporary file in the same directory and
        swapped in, so readers never see a partially written array.

        Returns:
            True if successful, False otherwise
        """
        tmp_path = None
        try:
            self._ensure_data_directory_exists()
            fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=".flights-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(json.dumps([flight.to_dict() for flight in flights], indent=2))
            os.replace(tmp_path, self.file_path)
            tmp_path = None
            self._logger.debug(f"Saved {len(flights)} flights to {self.file_path}")
            return True
        except OSError as e:
            self._logger.error(f"Error saving flights data: {e}")
            return False
        finally:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)

    def _next_id(self, flights: List[Flight]) -> str:
        """Millisecond timestamp id, bumped past any id already in use."""
        taken = {flight.id for flight in flights}
        candidate = int(self._clock() * 1000)
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    @staticmethod
    def _index_of(flights: List[Flight], flight_id: str) -> int:
        for index, flight in enumerate(flights):
            if flight.id == flight_id:
                return index
        return -1

    def find_all(self) -> List[Flight]:
        """Return every flight, or an empty list if the data cannot be read."""
        with self._lock:
            try:
                return self._read()
            except (OSError, ValueError) as e:
                self._logger.error(f"Error reading flights data: {e}")
                return []

    def find_by_id(self, flight_id: str) -> Optional[Flight]:
        for flight in self.find_all():
            if flight.id == flight_id:
                return flight
        return None

    def create(self, data: FlightData) -> Optional[Flight]:
        with self._lock:
            flights = self._load_for_update()
            new_flight = Flight.from_data(self._next_id(flights), data)
            flights.append(new_flight)

            if not self._save(flights):
                return None

            self._logger.info(f"Created flight {new_flight.id}")
            return new_flight

    def update(self, flight_id: str, data: FlightData) -> Optional[Flight]:
        with self._lock:
            flights = self._load_for_update()
            index = self._index_of(flights, flight_id)
            if index == -1:
                return None

            updated_flight = Flight.from_data(flight_id, data)
            flights[index] = updated_flight

            if not self._save(flights):
                raise FlightStoreError(f"Failed to persist update of flight {flight_id}")

            self._logger.info(f"Updated flight {flight_id}")
            return updated_flight

    def delete(self, flight_id: str) -> Optional[Flight]:
        with self._lock:
            flights = self._load_for_update()
            index = self._index_of(flights, flight_id)
            if index == -1:
                return None

            deleted_flight = flights.pop(index)

            if not self._save(flights):
                raise FlightStoreError(f"Failed to persist deletion of flight {flight_id}")

            self._logger.info(f"Deleted flight {flight_id}")
            return deleted_flight

    def ping(self) -> bool:
        with self._lock:
            try:
                self._read()
                return True
            except (OSError, ValueError) as e:
                self._logger.error(f"Flight store health check failed: {e}")
                return False
