"""Health endpoint router composition for app and service registry checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from ensembl_service.domain import HealthStatus
from ensembl_service.services import ServiceRegistry


def api_build_health_status(registry: ServiceRegistry) -> HealthStatus:
    """Derive health from the number of loaded services.

    Args:
        registry: Loaded service registry.

    Returns:
        HealthStatus: `ok` when at least one service is loaded, else `degraded`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    service_count = len(registry.registry_all())
    if service_count == 0:
        return HealthStatus(status="degraded", detail="no services loaded")
    return HealthStatus(status="ok", detail=f"{service_count} service(s) loaded")


def api_create_health_router(registry: ServiceRegistry) -> APIRouter:
    """Create health-check router reporting app and service registry state.

    Args:
        registry: Loaded service registry.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when registry is invalid.
    """

    if registry is None:
        raise ValueError("registry must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application and service registry health state.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        health = api_build_health_status(registry)
        payload = {
            "status": health.status,
            "app": "up",
            "services": len(registry.registry_all()),
            "detail": health.detail,
        }
        status_code = status.HTTP_200_OK if health.status == "ok" else status.HTTP_503_SERVICE_UNAVAILABLE
        return JSONResponse(content=payload, status_code=status_code)

    return router
