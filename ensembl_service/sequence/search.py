"""Sequence lookup call against the Ensembl Genomes REST API."""

from __future__ import annotations

import json
import logging
from typing import Any, Final

from ensembl_service.adapters import HttpClientToolPort, HttpToolError
from ensembl_service.domain import ParameterSet, UnknownParameterError

from .parameters import (
    SEQUENCE_DEFAULT_SPECIES,
    SEQUENCE_DEFAULT_TYPE,
    SEQUENCE_QUERY_PARAMETER,
    SEQUENCE_SPECIES_PARAMETER,
    SEQUENCE_TYPE_PARAMETER,
)

logger = logging.getLogger(__name__)

SEQUENCE_ENDPOINT_PATH: Final[str] = "sequence/id"


def sequence_build_request_body(param_set: ParameterSet) -> dict[str, str] | None:
    """Build the JSON request body for one sequence lookup.

    Returns:
        dict[str, str] | None: Request body, or None when the identifier is missing or blank.
    """

    try:
        query_value = param_set.parameter_set_get_value(SEQUENCE_QUERY_PARAMETER)
    except UnknownParameterError:
        return None
    normalized_query = str(query_value or "").strip()
    if not normalized_query:
        return None
    return {"query": normalized_query}


def sequence_build_query_parameters(param_set: ParameterSet) -> dict[str, str]:
    """Build URL query parameters, falling back to defaults for absent values."""

    species_parameter = param_set.parameter_set_find(SEQUENCE_SPECIES_PARAMETER)
    type_parameter = param_set.parameter_set_find(SEQUENCE_TYPE_PARAMETER)
    species = str((species_parameter.current_value if species_parameter else None) or SEQUENCE_DEFAULT_SPECIES)
    sequence_type = str((type_parameter.current_value if type_parameter else None) or SEQUENCE_DEFAULT_TYPE)
    return {"species": species.strip(), "type": sequence_type.strip()}


def sequence_run_search(param_set: ParameterSet, tool: HttpClientToolPort, rest_base_url: str) -> Any | None:
    """Run one blocking sequence lookup through a configured HTTP client tool.

    Args:
        param_set: Invocation parameters.
        tool: HTTP client tool already configured for JSON POST.
        rest_base_url: Root URL of the REST API.

    Returns:
        Any | None: Decoded JSON document, or None when no usable response was obtained.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    request_body = sequence_build_request_body(param_set)
    if request_body is None:
        logger.warning("Sequence search skipped: parameter '%s' is missing or blank", SEQUENCE_QUERY_PARAMETER)
        return None

    request_url = f"{rest_base_url.rstrip('/')}/{SEQUENCE_ENDPOINT_PATH}"
    try:
        payload = tool.tool_post_json(
            url=request_url,
            body=request_body,
            query_parameters=sequence_build_query_parameters(param_set),
        )
    except HttpToolError as error:
        logger.warning("Sequence search request to %s failed: %s", request_url, error)
        return None

    if payload is None:
        logger.warning("Sequence search request to %s returned no body", request_url)
        return None

    try:
        return json.loads(payload)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as error:
        logger.warning("Sequence search response from %s is not JSON: %s", request_url, error)
        return None
