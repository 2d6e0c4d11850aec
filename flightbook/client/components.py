"""Streamlit presentation components for the flights UI.

Components only read state and report user intent through callbacks; they
never call the API themselves.
"""
from datetime import datetime
from typing import Callable, Dict, Optional

import streamlit as st

from flightbook.client.state import FlightsState
from flightbook.domain.entities.flight import Flight, FlightData

FORM_OPEN_KEY = "flight_form_open"
FORM_ERROR_KEY = "flight_form_error"
FORM_FIELDS = ("origin", "destination", "departureTime", "arrivalTime", "price")


def format_timestamp(value: str) -> str:
    """Render an ISO-8601 timestamp for display; unparseable values pass through."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (ValueError, AttributeError):
        return value
    return parsed.strftime("%b %d, %Y %I:%M %p")


def format_price(price) -> str:
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return "-"
    return f"${price:.2f}"


def build_flight_data(draft: Dict[str, str]) -> FlightData:
    """
    Turn the form draft into flight data.

    Raises:
        ValueError: If the price is not a number or a field is empty
    """
    return FlightData(
        origin=draft.get("origin", "").strip(),
        destination=draft.get("destination", "").strip(),
        departure_time=draft.get("departureTime", "").strip(),
        arrival_time=draft.get("arrivalTime", "").strip(),
        price=float(draft.get("price", "")),
    )


def render_flight_card(flight: Flight, on_select: Optional[Callable[[Flight], None]] = None) -> None:
    with st.container(border=True):
        st.subheader(f"{flight.origin} to {flight.destination}")
        st.write(f"Departure: {format_timestamp(flight.departure_time)}")
        st.write(f"Arrival: {format_timestamp(flight.arrival_time)}")
        st.markdown(f"**{format_price(flight.price)}**")
        if on_select is not None:
            st.button("View details", key=f"select_{flight.id}", on_click=on_select, args=(flight,))


def render_flight_list(state: FlightsState, on_select: Callable[[Flight], None]) -> None:
    if state.loading:
        st.info("Loading flights...")
        return
    if state.error:
        st.error(f"Error: {state.error}")
        return

    st.header("Available Flights")
    if not state.flights:
        st.write("No flights available")
        return
    for flight in state.flights:
        render_flight_card(flight, on_select)


def render_flight_detail(state: FlightsState,
                         on_close: Callable[[], None],
                         on_delete: Callable[[Flight], None]) -> None:
    flight = state.selected_flight
    if flight is None:
        return

    st.header("Flight Details")
    st.button("Close", key="detail_close", on_click=on_close)
    if state.loading:
        st.write("Loading...")
        return

    st.subheader(f"{flight.origin} → {flight.destination}")
    st.write(f"Flight ID: {flight.id}")
    st.write(f"Departure: {format_timestamp(flight.departure_time)}")
    st.write(f"Arrival: {format_timestamp(flight.arrival_time)}")
    st.write(f"Price: {format_price(flight.price)}")
    st.button("Delete Flight", key="detail_delete", type="primary", on_click=on_delete, args=(flight,))


def _field_key(name: str) -> str:
    return f"flight_form_{name}"


def _open_form() -> None:
    st.session_state[FORM_OPEN_KEY] = True
    st.session_state[FORM_ERROR_KEY] = None


def _close_form() -> None:
    st.session_state[FORM_OPEN_KEY] = False


def _cancel_form() -> None:
    _close_form()
    st.session_state[FORM_ERROR_KEY] = None


def submit_draft(on_submit: Callable[[FlightData], None]) -> None:
    """Read the draft from session state, dispatch it, then reset and close the form."""
    draft = {name: str(st.session_state.get(_field_key(name), "")) for name in FORM_FIELDS}
    try:
        data = build_flight_data(draft)
    except ValueError as e:
        st.session_state[FORM_ERROR_KEY] = str(e)
    else:
        st.session_state[FORM_ERROR_KEY] = None
        on_submit(data)

    for name in FORM_FIELDS:
        st.session_state[_field_key(name)] = ""
    _close_form()


def render_flight_form(on_submit: Callable[[FlightData], None]) -> None:
    form_error = st.session_state.get(FORM_ERROR_KEY)
    if form_error:
        st.warning(f"Flight not saved: {form_error}")

    if not st.session_state.get(FORM_OPEN_KEY, False):
        st.button("Add New Flight", key="flight_form_toggle", on_click=_open_form)
        return

    with st.form("flight_form"):
        st.subheader("Add New Flight")
        st.text_input("Origin", key=_field_key("origin"))
        st.text_input("Destination", key=_field_key("destination"))
        st.text_input("Departure Time", key=_field_key("departureTime"), placeholder="2023-05-15T08:00:00Z")
        st.text_input("Arrival Time", key=_field_key("arrivalTime"), placeholder="2023-05-15T11:00:00Z")
        st.text_input("Price", key=_field_key("price"), placeholder="299.99")
        st.form_submit_button("Save Flight", on_click=submit_draft, args=(on_submit,))
    st.button("Cancel", key="flight_form_cancel", on_click=_cancel_form)
