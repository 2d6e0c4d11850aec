"""Streamlit client: API adapter, state container and presentation components."""
from flightbook.client.api_client import FlightsAPIClient, FlightsAPIError
from flightbook.client.state import FlightsState, FlightsStore

__all__ = [
    "FlightsAPIClient",
    "FlightsAPIError",
    "FlightsState",
    "FlightsStore",
]
