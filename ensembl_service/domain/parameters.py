"""Typed parameter model for service invocation inputs.

A `ParameterSet` is built fresh per request by a service's parameter contract
and describes one invocation's inputs. Values supplied by the caller are
coerced onto the declared parameter types before the set reaches an executor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ParameterType(str, Enum):
    """Value types accepted by service parameters."""

    STRING = "string"
    BOOLEAN = "boolean"
    SIGNED_INT = "signed_int"
    UNSIGNED_INT = "unsigned_int"
    REAL = "real"


class ParameterError(Exception):
    """Base exception for parameter contract failures."""


class UnknownParameterError(ParameterError, KeyError):
    """Raised when a parameter name is not recognized by the owning provider."""

    def __init__(self, parameter_name: str):
        super().__init__(f"unknown parameter: {parameter_name}")
        self.parameter_name = parameter_name

    def __str__(self) -> str:
        return str(self.args[0])


class ParameterValueError(ParameterError, ValueError):
    """Raised when a supplied value cannot be coerced onto the declared type."""


_BOOLEAN_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_BOOLEAN_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


def parameters_coerce_value(parameter_type: ParameterType, value: Any) -> Any:
    """Coerce one external value onto a declared parameter type.

    Args:
        parameter_type: Declared parameter type.
        value: Externally supplied value.

    Returns:
        Any: Value converted to the Python type for `parameter_type`.

    Raises:
        ParameterValueError: Raised when the value cannot be represented.
    """

    if value is None:
        return None

    if parameter_type == ParameterType.STRING:
        if isinstance(value, (dict, list)):
            raise ParameterValueError(f"expected string value, got {type(value).__name__}")
        return str(value)

    if parameter_type == ParameterType.BOOLEAN:
        if isinstance(value, bool):
            return value
        normalized_value = str(value).strip().lower()
        if normalized_value in _BOOLEAN_TRUE_VALUES:
            return True
        if normalized_value in _BOOLEAN_FALSE_VALUES:
            return False
        raise ParameterValueError(f"expected boolean value, got {value!r}")

    if parameter_type in (ParameterType.SIGNED_INT, ParameterType.UNSIGNED_INT):
        if isinstance(value, bool):
            raise ParameterValueError(f"expected integer value, got {value!r}")
        try:
            integer_value = int(str(value).strip())
        except ValueError as error:
            raise ParameterValueError(f"expected integer value, got {value!r}") from error
        if parameter_type == ParameterType.UNSIGNED_INT and integer_value < 0:
            raise ParameterValueError(f"expected unsigned integer value, got {integer_value}")
        return integer_value

    if parameter_type == ParameterType.REAL:
        if isinstance(value, bool):
            raise ParameterValueError(f"expected real value, got {value!r}")
        try:
            return float(str(value).strip())
        except ValueError as error:
            raise ParameterValueError(f"expected real value, got {value!r}") from error

    raise ParameterValueError(f"unsupported parameter type: {parameter_type}")


@dataclass
class Parameter:
    """One named, typed service parameter.

    Attributes:
        name: Parameter name used by callers.
        parameter_type: Declared value type.
        display_name: Human-readable label.
        description: Parameter description.
        default_value: Default value applied when no value is supplied.
        current_value: Value used for the invocation.
        options: Optional allowed values.
        required: Whether a non-blank value must be present before execution.
    """

    name: str
    parameter_type: ParameterType
    display_name: str
    description: str
    default_value: Any = None
    current_value: Any = None
    options: tuple[Any, ...] = ()
    required: bool = False

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("parameter name must not be blank")
        if self.current_value is None:
            self.current_value = self.default_value

    def parameter_validate_value(self, value: Any) -> Any:
        """Coerce a value and check it against the declared options without storing it.

        Args:
            value: Externally supplied value.

        Returns:
            Any: Coerced value.

        Raises:
            ParameterValueError: Raised when the value is not coercible or not an allowed option.
        """

        coerced_value = parameters_coerce_value(self.parameter_type, value)
        if self.options and coerced_value is not None and coerced_value not in self.options:
            allowed_values = ", ".join(str(option) for option in self.options)
            raise ParameterValueError(f"{self.name} must be one of: {allowed_values}")
        return coerced_value

    def parameter_to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation of the parameter."""

        payload: dict[str, Any] = {
            "name": self.name,
            "type": self.parameter_type.value,
            "display_name": self.display_name,
            "description": self.description,
            "default_value": self.default_value,
            "current_value": self.current_value,
            "required": self.required,
        }
        if self.options:
            payload["options"] = list(self.options)
        return payload


@dataclass
class ParameterSet:
    """Ordered collection of named parameters for one invocation.

    Attributes:
        name: Parameter set name.
        description: Parameter set description.
        parameters: Parameters in declaration order.
    """

    name: str
    description: str
    parameters: list[Parameter] = field(default_factory=list)
    released: bool = False

    def parameter_set_add(self, parameter: Parameter) -> None:
        """Append one parameter, rejecting duplicate names.

        Args:
            parameter: Parameter to add.

        Returns:
            None: Appends as side effect.

        Raises:
            ValueError: Raised when a parameter with the same name already exists.
            RuntimeError: Raised when the set has already been released.
        """

        self._parameter_set_raise_if_released()
        if self.parameter_set_find(parameter.name) is not None:
            raise ValueError(f"duplicate parameter name: {parameter.name}")
        self.parameters.append(parameter)

    def parameter_set_find(self, name: str) -> Parameter | None:
        """Return the parameter with `name`, or None when absent."""

        for parameter in self.parameters:
            if parameter.name == name:
                return parameter
        return None

    def parameter_set_get_value(self, name: str) -> Any:
        """Return the current value of a named parameter.

        Args:
            name: Parameter name.

        Returns:
            Any: Current parameter value.

        Raises:
            UnknownParameterError: Raised when the set has no such parameter.
        """

        parameter = self.parameter_set_find(name)
        if parameter is None:
            raise UnknownParameterError(name)
        return parameter.current_value

    def parameter_set_apply_values(self, values: dict[str, Any]) -> None:
        """Map externally supplied name/value pairs onto the typed parameters.

        Every value is validated before any is stored, so a rejected mapping
        leaves the set unchanged.

        Args:
            values: Mapping of parameter name to raw value.

        Returns:
            None: Updates parameter values as side effect.

        Raises:
            UnknownParameterError: Raised for names outside this set.
            ParameterValueError: Raised when a value cannot be coerced.
            RuntimeError: Raised when the set has already been released.
        """

        self._parameter_set_raise_if_released()
        validated_values: list[tuple[Parameter, Any]] = []
        for name, value in values.items():
            parameter = self.parameter_set_find(name)
            if parameter is None:
                raise UnknownParameterError(name)
            validated_values.append((parameter, parameter.parameter_validate_value(value)))

        for parameter, validated_value in validated_values:
            parameter.current_value = validated_value

    def parameter_set_release(self) -> None:
        """Drop all parameters and mark the set released.

        Raises:
            RuntimeError: Raised when the set was already released.
        """

        self._parameter_set_raise_if_released()
        self.parameters.clear()
        self.released = True

    def parameter_set_to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation of the parameter set."""

        return {
            "name": self.name,
            "description": self.description,
            "parameters": [parameter.parameter_to_dict() for parameter in self.parameters],
        }

    def _parameter_set_raise_if_released(self) -> None:
        if self.released:
            raise RuntimeError(f"parameter set '{self.name}' has already been released")
