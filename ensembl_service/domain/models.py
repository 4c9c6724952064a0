"""Typed domain models shared across runtime layers.

This module provides simple data contracts for service identity, ontology
annotation and health reporting.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str


@dataclass(frozen=True)
class SchemaTerm:
    """One external ontology term annotating a service capability.

    Attributes:
        url: Term identifier URL, passed through uninterpreted.
        name: Human-readable term label.
        description: Term definition text.
    """

    url: str
    name: str
    description: str

    def __post_init__(self) -> None:
        if not self.url.strip():
            raise ValueError("schema term url must not be blank")
        if not self.name.strip():
            raise ValueError("schema term name must not be blank")

    def schema_term_to_dict(self) -> dict[str, str]:
        """Return a JSON-ready representation of the term."""

        return {"url": self.url, "name": self.name, "description": self.description}


@dataclass
class ServiceMetadata:
    """Capability annotation for a service: category plus input/output terms.

    Attributes:
        category: Operation term describing what the service does.
        application_category: Optional application-level term.
        input_terms: Terms describing accepted inputs.
        output_terms: Terms describing produced outputs.
    """

    category: SchemaTerm
    application_category: SchemaTerm | None = None
    input_terms: list[SchemaTerm] = field(default_factory=list)
    output_terms: list[SchemaTerm] = field(default_factory=list)

    def metadata_add_input(self, term: SchemaTerm) -> None:
        """Append one input term, rejecting duplicates by url."""

        if any(existing.url == term.url for existing in self.input_terms):
            raise ValueError(f"duplicate input term: {term.url}")
        self.input_terms.append(term)

    def metadata_add_output(self, term: SchemaTerm) -> None:
        """Append one output term, rejecting duplicates by url."""

        if any(existing.url == term.url for existing in self.output_terms):
            raise ValueError(f"duplicate output term: {term.url}")
        self.output_terms.append(term)

    def metadata_to_dict(self) -> dict[str, object]:
        """Return a JSON-ready representation of the metadata."""

        payload: dict[str, object] = {
            "category": self.category.schema_term_to_dict(),
            "input": [term.schema_term_to_dict() for term in self.input_terms],
            "output": [term.schema_term_to_dict() for term in self.output_terms],
        }
        if self.application_category is not None:
            payload["application_category"] = self.application_category.schema_term_to_dict()
        return payload
