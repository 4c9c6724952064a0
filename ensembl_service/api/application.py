"""FastAPI application factory for the service host surface.

This module composes the HTTP surface through which a host invokes the loaded
service descriptors.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from ensembl_service.config import AppSettings
from ensembl_service.services import ServiceRegistry

from .routers import api_create_health_router, api_create_services_router


def create_api_application(settings: AppSettings, registry: ServiceRegistry) -> FastAPI:
    """Create the FastAPI application instance for the service host.

    Args:
        settings: Validated application settings used for runtime metadata.
        registry: Registry of loaded services; closed on application shutdown.

    Returns:
        FastAPI: Framework application instance with service routes.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if registry is None:
        raise ValueError("registry must not be None")

    @asynccontextmanager
    async def foundation_lifespan(_application: FastAPI) -> AsyncIterator[None]:
        yield
        registry.registry_close()

    application = FastAPI(title="Ensembl Plants Service", lifespan=foundation_lifespan)

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal foundation response for bootstrap verification.

        Returns:
            dict[str, str]: Minimal response for API framework verification.

        Raises:
            RuntimeError: Raised if route handler cannot produce a response.
        """

        return {
            "service": "ensembl-service",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router(registry=registry))
    application.include_router(api_create_services_router(registry=registry))

    return application
