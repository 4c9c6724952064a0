"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
host or runs one sequence lookup from the command line.
"""

import argparse
import json

import uvicorn

from ensembl_service.bootstrap import bootstrap_create_application, bootstrap_create_registry
from ensembl_service.config import config_configure_logging, config_load_settings
from ensembl_service.domain import ParameterError
from ensembl_service.jobs import JobStatus
from ensembl_service.sequence import SEQUENCE_QUERY_PARAMETER, SEQUENCE_SPECIES_PARAMETER, SEQUENCE_TYPE_PARAMETER

_SEARCH_SERVICE_ALIAS = "ensembl/search"


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with status 1 when a `search` run does not succeed.
    """

    argument_parser = argparse.ArgumentParser(description="Ensembl Plants service runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "search"),
        help="Runtime command: `api` starts server, `search` runs one sequence lookup and prints the job set",
        type=str,
    )
    argument_parser.add_argument("--query", dest="query", type=str, help="Sequence identifier for `search`")
    argument_parser.add_argument("--species", dest="species", type=str, help="Optional species for `search`")
    argument_parser.add_argument(
        "--sequence-type",
        dest="sequence_type",
        type=str,
        help="Optional sequence type for `search`",
    )
    parsed_arguments = argument_parser.parse_args()

    if parsed_arguments.command == "search":
        if not (parsed_arguments.query or "").strip():
            argument_parser.error("--query is required for `search`")
        parameter_values = {SEQUENCE_QUERY_PARAMETER: parsed_arguments.query}
        if parsed_arguments.species:
            parameter_values[SEQUENCE_SPECIES_PARAMETER] = parsed_arguments.species
        if parsed_arguments.sequence_type:
            parameter_values[SEQUENCE_TYPE_PARAMETER] = parsed_arguments.sequence_type
        if not main_run_search(parameter_values):
            raise SystemExit(1)
        return

    settings = config_load_settings()
    application = bootstrap_create_application()
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


def main_run_search(parameter_values: dict[str, str]) -> bool:
    """Run one sequence lookup and print the job set as JSON.

    Args:
        parameter_values: Raw parameter values keyed by parameter name.

    Returns:
        bool: True when the single job succeeded.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    settings = config_load_settings()
    config_configure_logging(settings.log_level)
    registry = bootstrap_create_registry(settings)
    try:
        service = registry.registry_get(_SEARCH_SERVICE_ALIAS)
        if service is None:
            print(f"Service {_SEARCH_SERVICE_ALIAS} is not available")
            return False

        param_set = service.service_build_parameters()
        if param_set is None:
            print("Failed to build service parameters")
            return False
        try:
            param_set.parameter_set_apply_values(parameter_values)
            job_set = service.service_run(param_set)
        except ParameterError as error:
            print(f"Invalid parameters: {error}")
            return False
        finally:
            service.service_release_parameters(param_set)

        if job_set is None:
            print("Failed to allocate service jobs")
            return False
        print(json.dumps(job_set.job_set_to_dict(), indent=2))
        return all(job.status == JobStatus.SUCCEEDED for job in job_set.jobs)
    finally:
        registry.registry_close()


if __name__ == "__main__":
    main()
