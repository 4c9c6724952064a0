"""Sequence lookup parameter provider and search call."""

from .parameters import (
	SEQUENCE_DEFAULT_SPECIES,
	SEQUENCE_DEFAULT_TYPE,
	SEQUENCE_QUERY_PARAMETER,
	SEQUENCE_SPECIES_PARAMETER,
	SEQUENCE_TYPE_OPTIONS,
	SEQUENCE_TYPE_PARAMETER,
	sequence_add_parameters,
	sequence_get_parameter_type,
)
from .search import (
	SEQUENCE_ENDPOINT_PATH,
	sequence_build_query_parameters,
	sequence_build_request_body,
	sequence_run_search,
)

__all__ = [
	"SEQUENCE_DEFAULT_SPECIES",
	"SEQUENCE_DEFAULT_TYPE",
	"SEQUENCE_ENDPOINT_PATH",
	"SEQUENCE_QUERY_PARAMETER",
	"SEQUENCE_SPECIES_PARAMETER",
	"SEQUENCE_TYPE_OPTIONS",
	"SEQUENCE_TYPE_PARAMETER",
	"sequence_add_parameters",
	"sequence_build_query_parameters",
	"sequence_build_request_body",
	"sequence_get_parameter_type",
	"sequence_run_search",
]
