import time
from concurrent.futures import ThreadPoolExecutor

from docanalysis.config.settings import Settings
from docanalysis.database.models import UploadJob
from docanalysis.database.repositories.job_repository import JobRepository
from docanalysis.logging.logger import Log
from docanalysis.worker.job_runner import JobRunner


class Worker:
    """Poll loop: sleep -> claim a batch -> dispatch the batch concurrently."""

    def __init__(
        self,
        job_repo: JobRepository,
        job_runner: JobRunner,
        settings: Settings,
    ) -> None:
        self._job_repo = job_repo
        self._job_runner = job_runner
        self._settings = settings

    def run(self, max_jobs: int | None = None) -> None:
        """Poll for upload jobs until interrupted.

        With max_jobs set, return once that many jobs have been run.
        """
        Log.info("Analysis worker started", concurrency=self._settings.max_concurrent_analyses)
        jobs_done = 0
        try:
            while max_jobs is None or jobs_done < max_jobs:
                limit = self._batch_size(None if max_jobs is None else max_jobs - jobs_done)
                jobs = self._try_claim_jobs(limit)
                if jobs:
                    self._run_batch(jobs)
                    jobs_done += len(jobs)
                else:
                    interval = self._settings.job_poll_interval_seconds
                    Log.debug("Queue empty, sleeping", seconds=interval)
                    time.sleep(interval)
        except KeyboardInterrupt:
            Log.info("Analysis worker stopped", jobs_done=jobs_done)

    def run_until_idle(self) -> int:
        """Process jobs, retries included, until none are pending. Returns jobs run."""
        jobs_done = 0
        while True:
            jobs = self._try_claim_jobs(self._batch_size(None))
            if not jobs:
                return jobs_done
            self._run_batch(jobs)
            jobs_done += len(jobs)

    def _batch_size(self, remaining: int | None) -> int:
        size = max(1, self._settings.max_concurrent_analyses)
        return size if remaining is None else min(size, remaining)

    def _run_batch(self, jobs: list[UploadJob]) -> None:
        if len(jobs) == 1:
            self._job_runner.run(jobs[0])
            return
        with ThreadPoolExecutor(max_workers=len(jobs), thread_name_prefix="analysis") as pool:
            # list() drains the iterator so a runner crash surfaces here
            list(pool.map(self._job_runner.run, jobs))

    def _try_claim_jobs(self, limit: int) -> list[UploadJob]:
        """Attempt to claim pending jobs. Gracefully handle store errors."""
        try:
            return self._job_repo.claim_next_jobs(limit)
        except Exception as exc:
            Log.warning(f"Job store error, will retry: {exc}")
            return []
