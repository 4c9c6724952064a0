"""Job layer package for service invocation status and results."""

from .service_job import (
	JOB_TERMINAL_STATUSES,
	JobStatus,
	ServiceJob,
	ServiceJobSet,
	job_allocate_simple_job_set,
)

__all__ = [
	"JOB_TERMINAL_STATUSES",
	"JobStatus",
	"ServiceJob",
	"ServiceJobSet",
	"job_allocate_simple_job_set",
]
