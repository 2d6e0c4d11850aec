"""Client-side state container for the flights UI.

The store owns a single ``FlightsState``. Networked actions go through three
phases: pending (loading, error cleared), then fulfilled (result merged) or
rejected (error message recorded). Listeners are notified after each phase.
"""
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Optional

import requests

from flightbook.client.api_client import FlightsAPIClient, FlightsAPIError
from flightbook.domain.entities.flight import Flight, FlightData

logger = logging.getLogger(__name__)

Listener = Callable[["FlightsState"], None]


@dataclass(frozen=True)
class FlightsState:
    flights: List[Flight] = field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None
    selected_flight: Optional[Flight] = None


class FlightsStore:
    """State container mutated only through its actions."""

    def __init__(self, api_client: FlightsAPIClient, state: Optional[FlightsState] = None):
        self._api = api_client
        self._state = state or FlightsState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> FlightsState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)

    def _run(self, action: str, call: Callable[[], Any],
             on_fulfilled: Callable[[Any], dict]) -> bool:
        self._set_state(loading=True, error=None)
        try:
            result = call()
        except (FlightsAPIError, requests.RequestException, ValueError) as e:
            logger.warning(f"{action} rejected: {e}")
            self._set_state(loading=False, error=str(e) or "An unknown error occurred")
            return False

        self._set_state(loading=False, **on_fulfilled(result))
        return True

    def fetch_flights(self) -> bool:
        return self._run(
            "fetch_flights",
            self._api.list_flights,
            lambda flights: {"flights": flights},
        )

    def fetch_flight_by_id(self, flight_id: str) -> bool:
        return self._run(
            "fetch_flight_by_id",
            lambda: self._api.get_flight(flight_id),
            lambda flight: {"selected_flight": flight},
        )

    def create_flight(self, data: FlightData) -> bool:
        return self._run(
            "create_flight",
            lambda: self._api.create_flight(data),
            lambda flight: {"flights": [*self._state.flights, flight]},
        )

    def update_flight(self, flight: Flight) -> bool:
        return self._run(
            "update_flight",
            lambda: self._api.update_flight(flight),
            lambda updated: {"flights": [
                updated if existing.id == updated.id else existing
                for existing in self._state.flights
            ]},
        )

    def delete_flight(self, flight_id: str) -> bool:
        return self._run(
            "delete_flight",
            lambda: self._api.delete_flight(flight_id),
            lambda _deleted: {"flights": [
                existing for existing in self._state.flights if existing.id != flight_id
            ]},
        )

    def select_flight(self, flight: Optional[Flight]) -> None:
        self._set_state(selected_flight=flight)

    def clear_error(self) -> None:
        self._set_state(error=None)
