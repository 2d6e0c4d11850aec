"""Streamlit single-page client for the Flights API.

Run with: streamlit run flightbook/client/app.py
"""
import logging
import sys
from datetime import date

import streamlit as st

from flightbook.client.api_client import FlightsAPIClient
from flightbook.client.components import render_flight_detail, render_flight_form, render_flight_list
from flightbook.client.state import FlightsStore
from flightbook.config.settings import Config

STORE_KEY = "flights_store"

logging.basicConfig(
    level=logging.DEBUG if Config.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
)


def get_store() -> FlightsStore:
    """One store per browser session; flights are fetched when it is created."""
    if STORE_KEY not in st.session_state:
        store = FlightsStore(FlightsAPIClient())
        store.fetch_flights()
        st.session_state[STORE_KEY] = store
    return st.session_state[STORE_KEY]


def _delete_and_close(store: FlightsStore):
    def handler(flight):
        store.delete_flight(flight.id)
        store.select_flight(None)
    return handler


st.set_page_config(page_title="Fullstack Flights", page_icon="✈️", layout="wide")
st.title("Fullstack Flights")

store = get_store()

render_flight_form(on_submit=store.create_flight)

list_column, detail_column = st.columns([2, 1])
with list_column:
    render_flight_list(store.state, on_select=store.select_flight)
with detail_column:
    render_flight_detail(
        store.state,
        on_close=lambda: store.select_flight(None),
        on_delete=_delete_and_close(store),
    )

st.divider()
st.caption(f"© {date.today().year} Fullstack Flights App")
