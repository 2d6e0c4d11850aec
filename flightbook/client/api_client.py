"""Flights API client used by the Streamlit UI."""
import logging
import requests
from typing import Any, Dict, List, Optional
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from flightbook.config.settings import Config
from flightbook.domain.entities.flight import Flight, FlightData


class FlightsAPIError(Exception):
    """Raised when the Flights API answers with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class FlightsAPIClient:
    """
    Client for the Flights REST API.

    Every method raises FlightsAPIError for non-2xx responses and lets
    requests.RequestException propagate for transport failures.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the Flights API client.

        Args:
            base_url: Base URL of the Flights API (defaults to Config value)
            timeout: Request timeout in seconds (defaults to Config value)
            session: Pre-configured session (Dependency Injection)
        """
        self.base_url = (base_url or Config.FLIGHTS_API_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else int(Config.FLIGHTS_API_TIMEOUT)
        self._logger = logging.getLogger(__name__)

        if session is None:
            # Only idempotent methods are retried (urllib3 default)
            session = requests.Session()
            retry_strategy = Retry(
                total=3,
                backoff_factor=0.5,
                status_forcelist=[502, 503, 504],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    def _request(self, method: str, path: str, error_message: str,
                 json_data: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        self._logger.debug(f"Request: {method} {url}")

        response = self.session.request(
            method=method,
            url=url,
            headers={"Accept": "application/json"},
            json=json_data,
            timeout=self.timeout,
        )
        self._logger.debug(f"Status Code: {response.status_code}")

        if not response.ok:
            self._logger.warning(f"{method} {url} failed with status {response.status_code}")
            raise FlightsAPIError(error_message, response.status_code)
        return response.json()

    def list_flights(self) -> List[Flight]:
        records = self._request("GET", "flights", "Failed to fetch flights")
        return [Flight.from_record(record) for record in records]

    def get_flight(self, flight_id: str) -> Flight:
        record = self._request("GET", f"flights/{flight_id}", "Failed to fetch flight")
        return Flight.from_record(record)

    def create_flight(self, data: FlightData) -> Flight:
        record = self._request("POST", "flights", "Failed to create flight", json_data=data.to_dict())
        return Flight.from_record(record)

    def update_flight(self, flight: Flight) -> Flight:
        record = self._request(
            "PUT", f"flights/{flight.id}", "Failed to update flight", json_data=flight.to_dict()
        )
        return Flight.from_record(record)

    def delete_flight(self, flight_id: str) -> Flight:
        record = self._request("DELETE", f"flights/{flight_id}", "Failed to delete flight")
        return Flight.from_record(record)
