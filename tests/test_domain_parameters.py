"""Regression tests for typed parameter coercion and parameter set handling."""

from __future__ import annotations

import pytest

from ensembl_service.domain import (
    Parameter,
    ParameterSet,
    ParameterType,
    ParameterValueError,
    UnknownParameterError,
    parameters_coerce_value,
)


def _build_parameter_set() -> ParameterSet:
    param_set = ParameterSet(name="demo", description="demo parameters")
    param_set.parameter_set_add(
        Parameter(name="limit", parameter_type=ParameterType.UNSIGNED_INT, display_name="Limit", description="", default_value=10)
    )
    param_set.parameter_set_add(
        Parameter(
            name="mode",
            parameter_type=ParameterType.STRING,
            display_name="Mode",
            description="",
            default_value="fast",
            options=("fast", "slow"),
        )
    )
    return param_set


@pytest.mark.parametrize(
    ("parameter_type", "raw_value", "expected_value"),
    [
        (ParameterType.STRING, 12, "12"),
        (ParameterType.BOOLEAN, "yes", True),
        (ParameterType.BOOLEAN, "0", False),
        (ParameterType.SIGNED_INT, "-4", -4),
        (ParameterType.UNSIGNED_INT, " 7 ", 7),
        (ParameterType.REAL, "2.5", 2.5),
        (ParameterType.REAL, None, None),
    ],
)
def test_domain_parameters_coerce_supported_values(parameter_type: ParameterType, raw_value, expected_value) -> None:
    """Coerce raw external values onto declared types.

    Args:
        parameter_type: Declared parameter type.
        raw_value: Raw input value.
        expected_value: Expected coerced value.

    Returns:
        None: Assertions validate coercion output.

    Raises:
        AssertionError: Raised when coercion output drifts.
    """

    assert parameters_coerce_value(parameter_type, raw_value) == expected_value


@pytest.mark.parametrize(
    ("parameter_type", "raw_value"),
    [
        (ParameterType.BOOLEAN, "maybe"),
        (ParameterType.SIGNED_INT, "four"),
        (ParameterType.SIGNED_INT, True),
        (ParameterType.UNSIGNED_INT, "-1"),
        (ParameterType.REAL, "pi"),
        (ParameterType.STRING, {"nested": "value"}),
    ],
)
def test_domain_parameters_reject_uncoercible_values(parameter_type: ParameterType, raw_value) -> None:
    """Raise typed value errors for values that do not fit the declared type.

    Args:
        parameter_type: Declared parameter type.
        raw_value: Raw input value.

    Returns:
        None: Assertions validate rejection.

    Raises:
        AssertionError: Raised when invalid values are accepted.
    """

    with pytest.raises(ParameterValueError):
        parameters_coerce_value(parameter_type, raw_value)


def test_domain_parameter_set_apply_values_updates_current_values() -> None:
    """Apply external values while keeping defaults for untouched parameters.

    Returns:
        None: Assertions validate applied values.

    Raises:
        AssertionError: Raised when values are not applied.
    """

    param_set = _build_parameter_set()

    param_set.parameter_set_apply_values({"limit": "25"})

    assert param_set.parameter_set_get_value("limit") == 25
    assert param_set.parameter_set_get_value("mode") == "fast"


def test_domain_parameter_set_rejects_unknown_names_and_invalid_options() -> None:
    """Reject unknown names and values outside declared options.

    Returns:
        None: Assertions validate rejection behavior.

    Raises:
        AssertionError: Raised when invalid input is accepted.
    """

    param_set = _build_parameter_set()

    with pytest.raises(UnknownParameterError, match="unknown parameter: depth"):
        param_set.parameter_set_apply_values({"depth": 3})
    with pytest.raises(ParameterValueError, match="mode must be one of: fast, slow"):
        param_set.parameter_set_apply_values({"mode": "medium"})
    with pytest.raises(UnknownParameterError):
        param_set.parameter_set_get_value("depth")


def test_domain_parameter_set_rejects_duplicates_and_use_after_release() -> None:
    """Reject duplicate names and any mutation after release.

    Returns:
        None: Assertions validate set lifecycle guards.

    Raises:
        AssertionError: Raised when guards are bypassed.
    """

    param_set = _build_parameter_set()

    with pytest.raises(ValueError, match="duplicate parameter name: limit"):
        param_set.parameter_set_add(
            Parameter(name="limit", parameter_type=ParameterType.STRING, display_name="Limit", description="")
        )

    param_set.parameter_set_release()

    with pytest.raises(RuntimeError, match="already been released"):
        param_set.parameter_set_apply_values({"limit": 1})
    with pytest.raises(RuntimeError, match="already been released"):
        param_set.parameter_set_release()


def test_domain_parameter_set_to_dict_lists_parameters_in_order() -> None:
    """Serialize the parameter set with options and defaults in declaration order.

    Returns:
        None: Assertions validate serialized shape.

    Raises:
        AssertionError: Raised when serialization drifts.
    """

    payload = _build_parameter_set().parameter_set_to_dict()

    assert payload["name"] == "demo"
    assert [parameter["name"] for parameter in payload["parameters"]] == ["limit", "mode"]
    assert payload["parameters"][0]["type"] == "unsigned_int"
    assert payload["parameters"][1]["options"] == ["fast", "slow"]
    assert "options" not in payload["parameters"][0]


def test_domain_parameter_set_apply_values_is_all_or_nothing() -> None:
    """Leave every value untouched when any supplied value is rejected.

    Returns:
        None: Assertions validate atomic value application.

    Raises:
        AssertionError: Raised when earlier values survive a rejected mapping.
    """

    param_set = _build_parameter_set()

    with pytest.raises(ParameterValueError):
        param_set.parameter_set_apply_values({"limit": "25", "mode": "medium"})
    with pytest.raises(UnknownParameterError):
        param_set.parameter_set_apply_values({"limit": "30", "depth": 3})

    assert param_set.parameter_set_get_value("limit") == 10
    assert param_set.parameter_set_get_value("mode") == "fast"
