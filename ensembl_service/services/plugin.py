"""Plugin registration hooks and alias registry for service descriptors."""

from __future__ import annotations

import logging
from typing import Any

from ensembl_service.adapters import HttpToolFactory, adapters_create_http_tool_factory
from ensembl_service.config import AppSettings

from .ensembl_rest import ENSEMBL_ROOT_REST_URI, EnsemblRestService
from .interfaces import ServicePort

logger = logging.getLogger(__name__)


def services_get_services(
    settings: AppSettings | None = None,
    http_tool_factory: HttpToolFactory | None = None,
) -> list[ServicePort]:
    """Return the services exposed by this plugin.

    Args:
        settings: Optional runtime settings supplying REST URL and timeout.
        http_tool_factory: Optional HTTP tool factory overriding the settings-based one.

    Returns:
        list[ServicePort]: Zero or one fully initialized service descriptors.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    rest_base_url = settings.ensembl_rest_base_url if settings is not None else ENSEMBL_ROOT_REST_URI
    if http_tool_factory is None:
        if settings is not None:
            http_tool_factory = adapters_create_http_tool_factory(
                timeout_seconds=settings.ensembl_request_timeout_seconds,
                user_agent=settings.ensembl_user_agent,
            )
        else:
            http_tool_factory = adapters_create_http_tool_factory()

    try:
        service = EnsemblRestService(http_tool_factory=http_tool_factory, rest_base_url=rest_base_url)
    except ValueError as error:
        logger.error("Failed to initialise Ensembl REST service: %s", error)
        return []
    return [service]


def services_release_services(services: list[ServicePort]) -> None:
    """Close every service returned by `services_get_services`."""

    for service in services:
        if not service.service_close():
            logger.error("Failed to close service %s", service.service_name())
    services.clear()


def services_describe(service: ServicePort) -> dict[str, Any]:
    """Return a JSON-ready identity and metadata summary of a service."""

    metadata = service.service_metadata()
    return {
        "name": service.service_name(),
        "alias": service.service_alias(),
        "description": service.service_description(),
        "uri": service.service_uri(),
        "metadata": metadata.metadata_to_dict() if metadata is not None else None,
    }


class ServiceRegistry:
    """Alias-keyed registry of loaded services for host surfaces."""

    def __init__(self, services: list[ServicePort]):
        """Register services by alias.

        Args:
            services: Loaded service descriptors.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when two services share an alias.
        """

        self._services: dict[str, ServicePort] = {}
        for service in services:
            alias = service.service_alias()
            if alias in self._services:
                raise ValueError(f"duplicate service alias: {alias}")
            self._services[alias] = service

    def registry_get(self, alias: str) -> ServicePort | None:
        """Return the service registered under `alias`, or None."""

        return self._services.get(alias.strip())

    def registry_all(self) -> list[ServicePort]:
        """Return all registered services in registration order."""

        return list(self._services.values())

    def registry_close(self) -> None:
        """Close and forget every registered service."""

        services = self.registry_all()
        self._services.clear()
        services_release_services(services)
