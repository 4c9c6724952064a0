"""Ensembl Plants sequence lookup service descriptor and job executor."""

from __future__ import annotations

import logging
import threading
from typing import Any, Final

from ensembl_service.adapters import (
    HttpToolAllocationError,
    HttpToolConfigurationError,
    HttpToolFactory,
    adapters_validate_http_url,
)
from ensembl_service.domain import ParameterSet, ParameterType, ServiceMetadata
from ensembl_service.jobs import JobStatus, ServiceJob, ServiceJobSet, job_allocate_simple_job_set
from ensembl_service.sequence import sequence_add_parameters, sequence_get_parameter_type, sequence_run_search

from .interfaces import ServicePort, services_build_alias
from .metadata import metadata_build_sequence_search_metadata

logger = logging.getLogger(__name__)

ENSEMBL_ROOT_REST_URI: Final[str] = "http://rest.ensemblgenomes.org/"


def services_get_root_rest_uri() -> str:
    """Return the default root URL of the Ensembl Genomes REST API."""

    return ENSEMBL_ROOT_REST_URI


class EnsemblRestService(ServicePort):
    """Service wrapping one blocking Ensembl REST sequence lookup as a single job.

    Each run clears and repopulates a results container owned by this
    descriptor. Runs on one descriptor are serialized by an instance lock.
    """

    _SERVICE_NAME: Final[str] = "Ensembl Plants service"
    _SERVICE_DESCRIPTION: Final[str] = "A service to access the Ensembl Plants data"
    _SERVICE_ALIAS: Final[str] = services_build_alias("ensembl", "search")
    _SERVICE_URI: Final[str] = "http://plants.ensembl.org/index.html"
    _PARAMETER_SET_NAME: Final[str] = "EnsemblRest service parameters"
    _PARAMETER_SET_DESCRIPTION: Final[str] = "The parameters used for the EnsemblRest service"
    _JOB_NAME: Final[str] = "Ensembl result"
    _STORE_RESULT_FAILED_MESSAGE: Final[str] = "Failed to store result"

    def __init__(
        self,
        http_tool_factory: HttpToolFactory,
        rest_base_url: str = ENSEMBL_ROOT_REST_URI,
        job_result_capacity: int | None = None,
    ):
        """Initialize the descriptor and its private results container.

        Args:
            http_tool_factory: Factory acquiring one HTTP client tool per run.
            rest_base_url: Root URL of the REST API.
            job_result_capacity: Optional maximum number of results a job may store.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies or config values are invalid.
        """

        if http_tool_factory is None:
            raise ValueError("http_tool_factory must not be None")
        if not rest_base_url.strip():
            raise ValueError("rest_base_url must not be blank")
        normalized_base_url = adapters_validate_http_url(rest_base_url)
        if job_result_capacity is not None and job_result_capacity < 0:
            raise ValueError("job_result_capacity must be >= 0")

        self._http_tool_factory = http_tool_factory
        self._rest_base_url = normalized_base_url
        self._job_result_capacity = job_result_capacity
        self._results: list[Any] = []
        self._lock = threading.Lock()
        self._closed = False

    def service_name(self) -> str:
        """Return the human-readable service name."""

        return self._SERVICE_NAME

    def service_description(self) -> str:
        """Return the service description."""

        return self._SERVICE_DESCRIPTION

    def service_alias(self) -> str:
        """Return the namespaced alias hosts use to address the service."""

        return self._SERVICE_ALIAS

    def service_uri(self) -> str:
        """Return the informational URL of the backing data resource."""

        return self._SERVICE_URI

    def service_metadata(self) -> ServiceMetadata | None:
        """Return ontology metadata, or None when it cannot be built."""

        return metadata_build_sequence_search_metadata()

    def service_build_parameters(self, resource: Any = None, user: Any = None) -> ParameterSet | None:
        """Build the sequence lookup parameter set.

        Args:
            resource: Unused target resource.
            user: Unused user details.

        Returns:
            ParameterSet | None: Populated parameter set, or None when population failed.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        _ = (resource, user)
        param_set = ParameterSet(name=self._PARAMETER_SET_NAME, description=self._PARAMETER_SET_DESCRIPTION)
        if sequence_add_parameters(param_set):
            return param_set

        param_set.parameter_set_release()
        return None

    def service_resolve_parameter_type(self, parameter_name: str) -> ParameterType:
        """Return the declared type of a named parameter.

        Args:
            parameter_name: Parameter name.

        Returns:
            ParameterType: Declared parameter type.

        Raises:
            UnknownParameterError: Raised when the name is not a sequence lookup parameter.
        """

        return sequence_get_parameter_type(parameter_name)

    def service_release_parameters(self, param_set: ParameterSet) -> None:
        """Release a parameter set built by `service_build_parameters`.

        Args:
            param_set: Parameter set to release.

        Returns:
            None: Releases the set as side effect.

        Raises:
            RuntimeError: Raised when the set was already released.
        """

        param_set.parameter_set_release()

    def service_run(self, param_set: ParameterSet, user: Any = None) -> ServiceJobSet | None:
        """Run one sequence lookup and report it as a single-job job set.

        The job is marked `FAILED_TO_START` before any transport work so every
        early exit leaves a terminal status.

        Args:
            param_set: Invocation parameters owned by the caller.
            user: Unused user details.

        Returns:
            ServiceJobSet | None: Job set with one terminal job, or None when the job set
                could not be allocated.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        _ = user
        try:
            job_set = job_allocate_simple_job_set(
                service_name=self._SERVICE_NAME,
                job_name=self._JOB_NAME,
                result_capacity=self._job_result_capacity,
            )
        except ValueError as error:
            logger.error("Failed to allocate job set for %s: %s", self._SERVICE_NAME, error)
            return None

        job = job_set.job_set_get_job(0)
        job.job_set_status(JobStatus.FAILED_TO_START)

        with self._lock:
            if self._closed:
                logger.error("Cannot run %s: service has been closed", self._SERVICE_NAME)
                return job_set
            self._service_execute_job(job=job, param_set=param_set)

        return job_set

    def service_match_file(self, resource: Any) -> ParameterSet | None:
        """Return None; this service does not interpret files."""

        _ = resource
        return None

    def service_close(self) -> bool:
        """Release the private results container.

        Returns:
            bool: Always True; a repeated close is a no-op.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        with self._lock:
            if not self._closed:
                self._results.clear()
                self._closed = True
        return True

    def service_latest_results(self) -> list[Any]:
        """Return a copy of the results stored by the most recent run."""

        with self._lock:
            return list(self._results)

    def _service_execute_job(self, job: ServiceJob, param_set: ParameterSet) -> None:
        try:
            tool = self._http_tool_factory()
        except HttpToolAllocationError as error:
            logger.error("Failed to allocate HTTP client tool for %s: %s", self._SERVICE_NAME, error)
            return

        with tool:
            try:
                tool.tool_configure_json_post()
            except HttpToolConfigurationError as error:
                logger.error("Failed to set HTTP client tool for HTTP POST request: %s", error)
                return

            self._results.clear()
            result = sequence_run_search(param_set=param_set, tool=tool, rest_base_url=self._rest_base_url)

            if result is None:
                job.job_set_status(JobStatus.FAILED)
                job.job_add_error_message(f"No response obtained from {self._rest_base_url}")
                return

            if job.job_add_result(result):
                job.job_set_status(JobStatus.SUCCEEDED)
                self._results.append(result)
                return

            job.job_set_status(JobStatus.ERROR)
            job.job_add_error_message(self._STORE_RESULT_FAILED_MESSAGE)
            logger.error("Failed to add result for %s", str(job.job_id))
