"""Sequence query parameter definitions shared by sequence lookup services."""

from __future__ import annotations

import logging
from typing import Final

from ensembl_service.domain import Parameter, ParameterSet, ParameterType, UnknownParameterError

logger = logging.getLogger(__name__)

SEQUENCE_QUERY_PARAMETER: Final[str] = "query"
SEQUENCE_SPECIES_PARAMETER: Final[str] = "species"
SEQUENCE_TYPE_PARAMETER: Final[str] = "sequence_type"

SEQUENCE_DEFAULT_SPECIES: Final[str] = "arabidopsis_thaliana"
SEQUENCE_DEFAULT_TYPE: Final[str] = "genomic"
SEQUENCE_TYPE_OPTIONS: Final[tuple[str, ...]] = ("genomic", "cds", "cdna", "protein")

_SEQUENCE_PARAMETER_TYPES: Final[dict[str, ParameterType]] = {
    SEQUENCE_QUERY_PARAMETER: ParameterType.STRING,
    SEQUENCE_SPECIES_PARAMETER: ParameterType.STRING,
    SEQUENCE_TYPE_PARAMETER: ParameterType.STRING,
}


def sequence_add_parameters(param_set: ParameterSet) -> bool:
    """Populate a parameter set with the sequence lookup parameters.

    Args:
        param_set: Empty parameter set owned by the caller.

    Returns:
        bool: True when every parameter was added, False otherwise.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    try:
        param_set.parameter_set_add(
            Parameter(
                name=SEQUENCE_QUERY_PARAMETER,
                parameter_type=_SEQUENCE_PARAMETER_TYPES[SEQUENCE_QUERY_PARAMETER],
                display_name="Sequence identifier",
                description="The gene or sequence identifier to look up, e.g. AT1G01010",
                required=True,
            )
        )
        param_set.parameter_set_add(
            Parameter(
                name=SEQUENCE_SPECIES_PARAMETER,
                parameter_type=_SEQUENCE_PARAMETER_TYPES[SEQUENCE_SPECIES_PARAMETER],
                display_name="Species",
                description="The Ensembl Plants species production name",
                default_value=SEQUENCE_DEFAULT_SPECIES,
            )
        )
        param_set.parameter_set_add(
            Parameter(
                name=SEQUENCE_TYPE_PARAMETER,
                parameter_type=_SEQUENCE_PARAMETER_TYPES[SEQUENCE_TYPE_PARAMETER],
                display_name="Sequence type",
                description="The type of sequence to return",
                default_value=SEQUENCE_DEFAULT_TYPE,
                options=SEQUENCE_TYPE_OPTIONS,
            )
        )
    except (ValueError, RuntimeError) as error:
        logger.error("Failed to add sequence parameters to %s: %s", param_set.name, error)
        return False

    return True


def sequence_get_parameter_type(parameter_name: str) -> ParameterType:
    """Return the declared type of a sequence lookup parameter.

    Args:
        parameter_name: Parameter name.

    Returns:
        ParameterType: Declared parameter type.

    Raises:
        UnknownParameterError: Raised when the name is not a sequence parameter.
    """

    try:
        return _SEQUENCE_PARAMETER_TYPES[parameter_name]
    except KeyError as error:
        raise UnknownParameterError(parameter_name) from error
