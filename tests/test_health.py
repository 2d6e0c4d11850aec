from unittest.mock import MagicMock

from flightbook import create_app
from flightbook.config.settings import TestingConfig
from flightbook.domain.interfaces.flight_repository import IFlightRepository
from flightbook.infrastructure.service_container import ServiceContainer


def test_health_and_liveness(client):
    assert client.get("/health").get_json() == {"status": "healthy", "service": "flights-api"}
    assert client.get("/health/live").status_code == 200


def test_readiness_with_readable_store(client):
    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.get_json()["checks"] == {"flight_store": True, "overall": True}


def test_readiness_with_broken_store():
    repository = MagicMock(spec=IFlightRepository)
    repository.ping.return_value = False
    container = ServiceContainer(TestingConfig, flight_repository=repository)
    client = create_app(TestingConfig, service_container=container).test_client()

    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.get_json()["status"] == "not_ready"


def test_service_container_builds_repository_from_config(tmp_path):
    class Config(TestingConfig):
        DATA_DIR = str(tmp_path / "store")
        FLIGHTS_FILE = "records.json"

    container = ServiceContainer(Config)
    repository = container.get_flight_repository()

    assert repository is container.get_flight_repository()
    assert repository.file_path == str(tmp_path / "store" / "records.json")
