"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from ensembl_service.api import create_api_application
from ensembl_service.config import AppSettings, config_configure_logging, config_load_settings
from ensembl_service.services import ServiceRegistry, services_get_services


def bootstrap_create_registry(settings: AppSettings) -> ServiceRegistry:
    """Load plugin services and register them by alias.

    Args:
        settings: Validated runtime settings.

    Returns:
        ServiceRegistry: Registry holding every loaded service.

    Raises:
        ValueError: Raised when loaded services share an alias.
    """

    return ServiceRegistry(services_get_services(settings=settings))


def bootstrap_create_application() -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    settings = config_load_settings()
    config_configure_logging(settings.log_level)
    return create_api_application(settings=settings, registry=bootstrap_create_registry(settings))
