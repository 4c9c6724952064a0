"""Domain models used across application layer boundaries."""

from .models import HealthStatus, SchemaTerm, ServiceMetadata
from .parameters import (
	Parameter,
	ParameterError,
	ParameterSet,
	ParameterType,
	ParameterValueError,
	UnknownParameterError,
	parameters_coerce_value,
)

__all__ = [
	"HealthStatus",
	"Parameter",
	"ParameterError",
	"ParameterSet",
	"ParameterType",
	"ParameterValueError",
	"SchemaTerm",
	"ServiceMetadata",
	"UnknownParameterError",
	"parameters_coerce_value",
]
