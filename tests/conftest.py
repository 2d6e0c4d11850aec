import pytest

from flightbook import create_app
from flightbook.config.settings import TestingConfig
from flightbook.domain.entities.flight import Flight, FlightData
from flightbook.infrastructure.repositories.json_flight_repository import JsonFlightRepository
from flightbook.infrastructure.service_container import ServiceContainer

from tests.payloads import NYC_LAX, CHI_MIA


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def repository(data_dir):
    return JsonFlightRepository(str(data_dir))


@pytest.fixture
def app(repository):
    container = ServiceContainer(TestingConfig, flight_repository=repository)
    return create_app(TestingConfig, service_container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def nyc_lax_data():
    return FlightData.from_dict(NYC_LAX)


@pytest.fixture
def sample_flights():
    return [
        Flight.from_dict({"id": "1", **NYC_LAX}),
        Flight.from_dict({"id": "2", **CHI_MIA}),
    ]
