"""Service layer package for pluggable service descriptors and registration hooks."""

from .ensembl_rest import ENSEMBL_ROOT_REST_URI, EnsemblRestService, services_get_root_rest_uri
from .interfaces import SERVICE_GROUP_ALIAS_SEPARATOR, ServicePort, services_build_alias
from .metadata import (
	EDAM_ONTOLOGY_PREFIX,
	QUERY_AND_RETRIEVAL_TERM_URL,
	SEQUENCE_IDENTIFIER_TERM_URL,
	SEQUENCE_TERM_URL,
	metadata_build_sequence_search_metadata,
)
from .plugin import ServiceRegistry, services_describe, services_get_services, services_release_services

__all__ = [
	"EDAM_ONTOLOGY_PREFIX",
	"ENSEMBL_ROOT_REST_URI",
	"EnsemblRestService",
	"QUERY_AND_RETRIEVAL_TERM_URL",
	"SEQUENCE_IDENTIFIER_TERM_URL",
	"SEQUENCE_TERM_URL",
	"SERVICE_GROUP_ALIAS_SEPARATOR",
	"ServicePort",
	"ServiceRegistry",
	"metadata_build_sequence_search_metadata",
	"services_build_alias",
	"services_describe",
	"services_get_root_rest_uri",
	"services_get_services",
	"services_release_services",
]
