from docanalysis.config.settings import Settings
from docanalysis.database.models import UploadJob
from docanalysis.database.repositories.document_repository import DocumentRepository
from docanalysis.database.repositories.job_repository import JobRepository
from docanalysis.extraction.exceptions import UnsupportedFormatError
from docanalysis.logging.logger import Log
from docanalysis.processor.processor import Processor


class JobRunner:
    """Run one upload job and apply the caller-level failure policy.

    - success: record is Processed with analysis, tags and summary
    - unsupported format: not retried; record is Processed with degraded metadata
    - any other failure: retried until max attempts, then degraded
    """

    def __init__(
        self,
        processor: Processor,
        job_repo: JobRepository,
        doc_repo: DocumentRepository,
        settings: Settings,
    ) -> None:
        self._processor = processor
        self._job_repo = job_repo
        self._doc_repo = doc_repo
        self._settings = settings

    def run(self, job: UploadJob) -> None:
        """Execute a single job with error handling."""
        Log.info(f"Running job {job.id} (attempt {job.attempts + 1})")
        try:
            result = self._processor.analyze(job.raw_input, job.document_id)
            tags = self._processor.generate_tags(result.extracted_text, result.document_type)
            self._doc_repo.mark_processed(
                job.document_id,
                category=result.document_type.value,
                tags=tags,
                description=result.summary,
                analysis=result.to_payload(),
            )
            self._job_repo.mark_done(job.id)
            Log.info(f"Job {job.id} completed successfully", tags=",".join(tags))
        except UnsupportedFormatError as exc:
            self._degrade(job, exc)
        except Exception as exc:
            self._handle_failure(job, exc)

    def _handle_failure(self, job: UploadJob, exc: Exception) -> None:
        """Increment attempts; degrade if at max, otherwise back to pending."""
        Log.error(f"Job {job.id} failed: {exc}")
        if job.attempts + 1 >= self._settings.max_analysis_attempts:
            Log.error(f"Job {job.id} permanently failed after {job.attempts + 1} attempts")
            self._degrade(job, exc)
        else:
            self._job_repo.increment_attempts(job.id)
            Log.warning(f"Job {job.id} will be retried (attempt {job.attempts + 1})")

    def _degrade(self, job: UploadJob, exc: Exception) -> None:
        record = self._doc_repo.find_by_id(job.document_id)
        fallback_tags = list(dict.fromkeys([record.category.lower(), record.file_type.lower()]))
        self._doc_repo.mark_degraded(job.document_id, tags=fallback_tags, error=str(exc))
        self._job_repo.mark_failed(job.id, str(exc))
        Log.warning(
            f"Document {job.document_id} stored without analysis",
            tags=",".join(fallback_tags),
        )
