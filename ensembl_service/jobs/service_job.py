"""Job-state channel reported back to the host for one service invocation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from uuid import UUID, uuid4


class JobStatus(str, Enum):
    """Lifecycle states of one service job."""

    NOT_STARTED = "not_started"
    FAILED_TO_START = "failed_to_start"
    FAILED = "failed"
    ERROR = "error"
    SUCCEEDED = "succeeded"


JOB_TERMINAL_STATUSES: frozenset[JobStatus] = frozenset(
    {JobStatus.FAILED_TO_START, JobStatus.FAILED, JobStatus.ERROR, JobStatus.SUCCEEDED}
)


@dataclass
class ServiceJob:
    """One trackable unit of work and its status/result state.

    Only `status`, `results` and `errors` change after creation.

    Attributes:
        name: Job label shown to consumers.
        service_name: Name of the service that produced the job.
        job_id: Unique job identifier.
        status: Current lifecycle status.
        results: Attached result payloads.
        errors: Attached diagnostic messages.
        result_capacity: Optional maximum number of stored results.
    """

    name: str
    service_name: str
    job_id: UUID = field(default_factory=uuid4)
    status: JobStatus = JobStatus.NOT_STARTED
    results: list[Any] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    result_capacity: int | None = None

    def job_set_status(self, status: JobStatus) -> None:
        """Set the job status."""

        self.status = JobStatus(status)

    def job_add_result(self, result: Any) -> bool:
        """Attach one structured result payload to the job.

        Args:
            result: JSON-like document returned by a remote call.

        Returns:
            bool: True when the result was stored, False when storage failed.
        """

        if self.result_capacity is not None and len(self.results) >= self.result_capacity:
            return False
        try:
            json.dumps(result)
        except (TypeError, ValueError):
            return False
        self.results.append(result)
        return True

    def job_add_error_message(self, message: str) -> None:
        """Attach one human-readable diagnostic message."""

        normalized_message = message.strip()
        if normalized_message:
            self.errors.append(normalized_message)

    def job_is_terminal(self) -> bool:
        """Return whether the job has reached a terminal status."""

        return self.status in JOB_TERMINAL_STATUSES

    def job_to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation of the job."""

        return {
            "job_id": str(self.job_id),
            "name": self.name,
            "service_name": self.service_name,
            "status": self.status.value,
            "results": list(self.results),
            "errors": list(self.errors),
        }


@dataclass
class ServiceJobSet:
    """Ordered jobs produced by one service invocation.

    Attributes:
        service_name: Name of the service that owns the jobs.
        jobs: Jobs in creation order.
    """

    service_name: str
    jobs: list[ServiceJob] = field(default_factory=list)

    def job_set_get_job(self, index: int) -> ServiceJob:
        """Return the job at `index`.

        Raises:
            IndexError: Raised when no job exists at `index`.
        """

        return self.jobs[index]

    def job_set_size(self) -> int:
        """Return the number of jobs in the set."""

        return len(self.jobs)

    def job_set_to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation of the job set."""

        return {
            "service_name": self.service_name,
            "jobs": [job.job_to_dict() for job in self.jobs],
        }


def job_allocate_simple_job_set(
    service_name: str,
    job_name: str,
    result_capacity: int | None = None,
) -> ServiceJobSet:
    """Build a job set containing exactly one not-started job.

    Args:
        service_name: Owning service name.
        job_name: Label of the single job.
        result_capacity: Optional maximum number of results the job may store.

    Returns:
        ServiceJobSet: Job set with one job in `NOT_STARTED` state.

    Raises:
        ValueError: Raised when the names are blank or the capacity is negative.
    """

    normalized_service_name = service_name.strip()
    normalized_job_name = job_name.strip()
    if not normalized_service_name:
        raise ValueError("service_name must not be blank")
    if not normalized_job_name:
        raise ValueError("job_name must not be blank")
    if result_capacity is not None and result_capacity < 0:
        raise ValueError("result_capacity must be >= 0")

    job = ServiceJob(
        name=normalized_job_name,
        service_name=normalized_service_name,
        result_capacity=result_capacity,
    )
    return ServiceJobSet(service_name=normalized_service_name, jobs=[job])
