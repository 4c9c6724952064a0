"""Service API router composition for listing, parameter discovery and runs."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ensembl_service.domain import ParameterError, ParameterSet
from ensembl_service.services import ServicePort, ServiceRegistry, services_describe


class ServiceRunRequest(BaseModel):
    """Request body for one service run.

    Attributes:
        alias: Namespaced service alias.
        parameters: Raw parameter values keyed by parameter name.
    """

    alias: str = Field(min_length=1)
    parameters: dict[str, Any] = Field(default_factory=dict)


def _api_error_response(message: str, status_code: int) -> JSONResponse:
    """Build the JSON error body shared by service routes."""

    return JSONResponse(content={"status": "error", "message": message}, status_code=status_code)


def _api_missing_required_parameters(param_set: ParameterSet) -> list[str]:
    """Return names of required parameters whose current value is missing or blank.

    Args:
        param_set: Parameter set after caller values were applied.

    Returns:
        list[str]: Missing parameter names in declaration order.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return [
        parameter.name
        for parameter in param_set.parameters
        if parameter.required and (parameter.current_value is None or not str(parameter.current_value).strip())
    ]


def api_create_services_router(registry: ServiceRegistry) -> APIRouter:
    """Create services router with list, parameter and run endpoints.

    Args:
        registry: Loaded service registry.

    Returns:
        APIRouter: Router exposing service APIs.

    Raises:
        ValueError: Raised when registry is invalid.
    """

    if registry is None:
        raise ValueError("registry must not be None")

    router = APIRouter(prefix="/services", tags=["services"])

    def _api_resolve_service(alias: str) -> ServicePort | None:
        """Return the registered service for `alias`, or None."""

        return registry.registry_get(alias)

    @router.get("")
    def api_services_list() -> JSONResponse:
        """Return identity and metadata for every loaded service.

        Returns:
            JSONResponse: Service descriptor list payload.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        payload = {"services": [services_describe(service) for service in registry.registry_all()]}
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/parameters")
    def api_services_parameters(alias: str = Query(min_length=1)) -> JSONResponse:
        """Return the parameter set a service accepts.

        Returns:
            JSONResponse: Parameter set payload.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        service = _api_resolve_service(alias)
        if service is None:
            return _api_error_response(f"unknown service alias: {alias}", status.HTTP_404_NOT_FOUND)

        param_set = service.service_build_parameters()
        if param_set is None:
            return _api_error_response("failed to build service parameters", status.HTTP_500_INTERNAL_SERVER_ERROR)
        try:
            payload = param_set.parameter_set_to_dict()
        finally:
            service.service_release_parameters(param_set)
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.post("/run")
    def api_services_run(request: ServiceRunRequest) -> JSONResponse:
        """Run one service invocation and return its job set.

        Returns:
            JSONResponse: Job set payload with terminal job status.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        service = _api_resolve_service(request.alias)
        if service is None:
            return _api_error_response(f"unknown service alias: {request.alias}", status.HTTP_404_NOT_FOUND)

        param_set = service.service_build_parameters()
        if param_set is None:
            return _api_error_response("failed to build service parameters", status.HTTP_500_INTERNAL_SERVER_ERROR)

        try:
            try:
                param_set.parameter_set_apply_values(request.parameters)
            except ParameterError as error:
                return _api_error_response(str(error), status.HTTP_400_BAD_REQUEST)

            missing_parameters = _api_missing_required_parameters(param_set)
            if missing_parameters:
                return _api_error_response(
                    f"missing required parameters: {', '.join(missing_parameters)}",
                    status.HTTP_400_BAD_REQUEST,
                )

            job_set = service.service_run(param_set)
        finally:
            service.service_release_parameters(param_set)

        if job_set is None:
            return _api_error_response("failed to allocate service jobs", status.HTTP_500_INTERNAL_SERVER_ERROR)
        return JSONResponse(content=job_set.job_set_to_dict(), status_code=status.HTTP_200_OK)

    return router
