"""Ontology metadata builder for sequence lookup services.

Term identifiers are EDAM ontology URLs passed through to consumers as opaque
constants.
"""

from __future__ import annotations

import logging
from typing import Final

from ensembl_service.domain import SchemaTerm, ServiceMetadata

logger = logging.getLogger(__name__)

EDAM_ONTOLOGY_PREFIX: Final[str] = "http://edamontology.org/"

QUERY_AND_RETRIEVAL_TERM_URL: Final[str] = f"{EDAM_ONTOLOGY_PREFIX}operation_0304"
SEQUENCE_IDENTIFIER_TERM_URL: Final[str] = f"{EDAM_ONTOLOGY_PREFIX}data_1063"
SEQUENCE_TERM_URL: Final[str] = f"{EDAM_ONTOLOGY_PREFIX}data_2044"


def _metadata_build_term(url: str, name: str, description: str, role: str) -> SchemaTerm | None:
    try:
        return SchemaTerm(url=url, name=name, description=description)
    except ValueError as error:
        logger.error("Failed to allocate %s term %s for service metadata: %s", role, url, error)
        return None


def metadata_build_sequence_search_metadata() -> ServiceMetadata | None:
    """Build "query and retrieval" metadata taking sequence ids and producing sequences.

    Returns:
        ServiceMetadata | None: Metadata, or None when any step fails.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    category = _metadata_build_term(
        url=QUERY_AND_RETRIEVAL_TERM_URL,
        name="Query and retrieval",
        description="Search or query a data resource and retrieve entries and / or annotation.",
        role="category",
    )
    if category is None:
        return None

    metadata = ServiceMetadata(category=category)

    input_term = _metadata_build_term(
        url=SEQUENCE_IDENTIFIER_TERM_URL,
        name="Sequence identifier",
        description="An identifier of molecular sequence(s) or entries from a molecular sequence database.",
        role="input",
    )
    if input_term is None:
        return None
    try:
        metadata.metadata_add_input(input_term)
    except ValueError as error:
        logger.error("Failed to add input term %s to service metadata: %s", input_term.url, error)
        return None

    output_term = _metadata_build_term(
        url=SEQUENCE_TERM_URL,
        name="Sequence",
        description=(
            "This concept is a placeholder of concepts for primary sequence data including raw sequences "
            "and sequence records. It should not normally be used for derivatives such as sequence "
            "alignments, motifs or profiles. One or more molecular sequences, possibly with associated "
            "annotation."
        ),
        role="output",
    )
    if output_term is None:
        return None
    try:
        metadata.metadata_add_output(output_term)
    except ValueError as error:
        logger.error("Failed to add output term %s to service metadata: %s", output_term.url, error)
        return None

    return metadata
