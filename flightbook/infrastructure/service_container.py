"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from typing import Optional

from flightbook.config.settings import Config
from flightbook.domain.interfaces.flight_repository import IFlightRepository
from flightbook.infrastructure.repositories.json_flight_repository import JsonFlightRepository


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.

    One container is built per application by the app factory and stored in
    ``app.config['service_container']``. Collaborators can be injected through
    the constructor (tests pass their own repository); otherwise they are
    created lazily from the configuration.
    """

    def __init__(
        self,
        config: type[Config] = Config,
        flight_repository: Optional[IFlightRepository] = None,
    ):
        """
        Initialize service container.

        Args:
            config: Configuration class providing storage settings
            flight_repository: Pre-built repository (Dependency Injection)
        """
        self._config = config
        self._flight_repository = flight_repository
        self._logger = logging.getLogger(__name__)

    def get_flight_repository(self) -> IFlightRepository:
        """Get or create flight repository instance."""
        if self._flight_repository is None:
            try:
                self._flight_repository = JsonFlightRepository(
                    data_dir=self._config.DATA_DIR,
                    file_name=self._config.FLIGHTS_FILE,
                )
                self._logger.info(
                    f"FlightRepository created with file {self._config.flights_file_path()}"
                )
            except Exception as e:
                self._logger.error(f"Failed to create FlightRepository: {e}")
                raise
        return self._flight_repository
