"""Typed interfaces for pluggable service descriptors."""

from __future__ import annotations

from typing import Any, Final, Protocol

from ensembl_service.domain import ParameterSet, ParameterType, ServiceMetadata
from ensembl_service.jobs import ServiceJobSet

SERVICE_GROUP_ALIAS_SEPARATOR: Final[str] = "/"


def services_build_alias(group: str, name: str) -> str:
    """Join a service group and name into a namespaced alias.

    Raises:
        ValueError: Raised when either part is blank or contains the separator.
    """

    normalized_group = group.strip()
    normalized_name = name.strip()
    if not normalized_group or not normalized_name:
        raise ValueError("alias group and name must not be blank")
    if SERVICE_GROUP_ALIAS_SEPARATOR in normalized_group or SERVICE_GROUP_ALIAS_SEPARATOR in normalized_name:
        raise ValueError(f"alias parts must not contain '{SERVICE_GROUP_ALIAS_SEPARATOR}'")
    return f"{normalized_group}{SERVICE_GROUP_ALIAS_SEPARATOR}{normalized_name}"


class ServicePort(Protocol):
    """Port definition for one externally invocable service capability."""

    def service_name(self) -> str:
        """Return the human-readable service name."""

    def service_description(self) -> str:
        """Return the service description."""

    def service_alias(self) -> str:
        """Return the namespaced service alias, e.g. `group/name`."""

    def service_uri(self) -> str:
        """Return the informational endpoint URI of the wrapped resource."""

    def service_metadata(self) -> ServiceMetadata | None:
        """Build capability metadata for the service.

        Returns:
            ServiceMetadata | None: Metadata, or None when it could not be built.
        """

    def service_build_parameters(self, resource: Any = None, user: Any = None) -> ParameterSet | None:
        """Build a fresh parameter set for one invocation.

        Args:
            resource: Optional resource the invocation targets.
            user: Optional user details.

        Returns:
            ParameterSet | None: Fully populated set, or None when it could not be built.
        """

    def service_resolve_parameter_type(self, parameter_name: str) -> ParameterType:
        """Resolve the declared type of a named parameter.

        Raises:
            UnknownParameterError: Raised when the name is not recognized.
        """

    def service_release_parameters(self, param_set: ParameterSet) -> None:
        """Release a parameter set built by `service_build_parameters`.

        Raises:
            RuntimeError: Raised when the set was already released.
        """

    def service_run(self, param_set: ParameterSet, user: Any = None) -> ServiceJobSet | None:
        """Execute the service once and report the resulting job set.

        Returns:
            ServiceJobSet | None: Job set with terminal job state, or None when no job set
                could be allocated.
        """

    def service_match_file(self, resource: Any) -> ParameterSet | None:
        """Return parameters when the service can process `resource`, else None."""

    def service_close(self) -> bool:
        """Release private descriptor state.

        Returns:
            bool: True when teardown completed.
        """
