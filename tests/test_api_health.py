"""Tests for API health endpoint behavior.

These tests validate deterministic response behavior for a loaded service
registry and for an empty one.
"""

from fastapi.testclient import TestClient

from ensembl_service.adapters import adapters_create_http_tool_factory
from ensembl_service.api.application import create_api_application
from ensembl_service.config import AppSettings
from ensembl_service.services import EnsemblRestService, ServiceRegistry


def test_api_health_returns_ok_when_services_are_loaded() -> None:
    """Return 200 and ok payload when at least one service is registered.

    Returns:
        None: Assertions validate status code and response body.

    Raises:
        AssertionError: Raised when health payload does not match expectations.
    """

    registry = ServiceRegistry([EnsemblRestService(http_tool_factory=adapters_create_http_tool_factory())])
    application = create_api_application(settings=AppSettings(), registry=registry)
    client = TestClient(application)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "app": "up",
        "services": 1,
        "detail": "1 service(s) loaded",
    }


def test_api_health_returns_degraded_when_registry_is_empty() -> None:
    """Return 503 and degraded payload when no service could be loaded.

    Returns:
        None: Assertions validate degraded status behavior.

    Raises:
        AssertionError: Raised when degraded response is not returned.
    """

    application = create_api_application(settings=AppSettings(), registry=ServiceRegistry([]))
    client = TestClient(application)

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "degraded"
    assert response.json()["services"] == 0
    assert response.json()["detail"] == "no services loaded"


def test_api_root_reports_environment_and_shutdown_closes_registry() -> None:
    """Return the foundation payload and close services when the app stops.

    Returns:
        None: Assertions validate root payload and shutdown cleanup.

    Raises:
        AssertionError: Raised when payload or cleanup drifts.
    """

    registry = ServiceRegistry([EnsemblRestService(http_tool_factory=adapters_create_http_tool_factory())])
    application = create_api_application(settings=AppSettings(environment_name="test"), registry=registry)

    with TestClient(application) as client:
        response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"service": "ensembl-service", "status": "ready", "environment": "test"}
    assert registry.registry_all() == []
