import itertools
import threading
from dataclasses import replace

from docanalysis.database.exceptions import JobNotFoundError
from docanalysis.database.models import UploadJob, utc_now
from docanalysis.extraction.models import RawInput


class JobRepository:
    """In-memory queue of upload jobs, claimed in creation order."""

    def __init__(self, max_attempts: int) -> None:
        self._max_attempts = max_attempts
        self._jobs: dict[int, UploadJob] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def enqueue(self, document_id: str, raw_input: RawInput) -> UploadJob:
        """Add a pending job for *document_id*."""
        with self._lock:
            job = UploadJob(id=next(self._ids), document_id=document_id, raw_input=raw_input)
            self._jobs[job.id] = job
            return replace(job)

    def claim_next_jobs(self, limit: int = 1) -> list[UploadJob]:
        """Claim up to *limit* pending jobs and move them to processing."""
        claimed: list[UploadJob] = []
        with self._lock:
            for job in self._jobs.values():
                if len(claimed) >= limit:
                    break
                if job.status == "pending" and job.attempts < self._max_attempts:
                    job.status = "processing"
                    job.updated_at = utc_now()
                    claimed.append(replace(job))
        return claimed

    def has_pending(self) -> bool:
        with self._lock:
            return any(
                job.status == "pending" and job.attempts < self._max_attempts
                for job in self._jobs.values()
            )

    def mark_done(self, job_id: int) -> None:
        """Mark a job as done and release its payload."""
        self._finish(job_id, status="done")

    def mark_failed(self, job_id: int, error: str) -> None:
        """Mark a job as permanently failed and release its payload."""
        self._finish(job_id, status="failed", error_message=error)

    def increment_attempts(self, job_id: int) -> None:
        """Increment attempt count and return job to pending."""
        with self._lock:
            job = self._get(job_id)
            job.attempts += 1
            job.status = "pending"
            job.updated_at = utc_now()

    def find_by_id(self, job_id: int) -> UploadJob:
        """Find a job by ID.

        Raises:
            JobNotFoundError: if no job with this ID exists.
        """
        with self._lock:
            return replace(self._get(job_id))

    def _finish(self, job_id: int, **changes: object) -> None:
        # Terminal jobs keep filename and size only.
        self._update(job_id, release_payload=True, **changes)

    def _update(self, job_id: int, release_payload: bool = False, **changes: object) -> None:
        with self._lock:
            job = self._get(job_id)
            if release_payload:
                job.raw_input = replace(job.raw_input, payload=b"")
            for name, value in changes.items():
                setattr(job, name, value)
            job.updated_at = utc_now()

    def _get(self, job_id: int) -> UploadJob:
        job = self._jobs.get(job_id)
        if job is None:
            raise JobNotFoundError(f"Job {job_id} not found")
        return job
