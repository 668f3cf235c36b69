from docanalysis.database.models import DocumentRecord
from docanalysis.database.repositories.document_repository import DocumentRepository
from docanalysis.database.repositories.job_repository import JobRepository
from docanalysis.extraction.models import RawInput
from docanalysis.logging.logger import Log

UPLOAD_CATEGORIES: dict[str, frozenset[str]] = {
    "Documents": frozenset({"docx", "doc", "txt", "rtf"}),
    "PDF": frozenset({"pdf"}),
    "Images": frozenset({"jpg", "jpeg", "png", "gif"}),
    "Spreadsheets": frozenset({"xlsx", "xls", "csv"}),
    "Presentations": frozenset({"pptx", "ppt"}),
}


def upload_category(extension: str) -> str:
    """Initial category of an upload, judged from its extension alone."""
    for category, extensions in UPLOAD_CATEGORIES.items():
        if extension.lower() in extensions:
            return category
    return "General"


class UploadIntake:
    """Registers uploads: creates the document record and queues its analysis."""

    def __init__(self, doc_repo: DocumentRepository, job_repo: JobRepository) -> None:
        self._doc_repo = doc_repo
        self._job_repo = job_repo

    def submit(self, raw_input: RawInput, uploaded_by: str) -> DocumentRecord:
        extension = raw_input.extension or "unknown"
        record = self._doc_repo.create(
            name=raw_input.filename,
            file_type=extension.upper(),
            category=upload_category(extension),
            size_bytes=raw_input.size,
            uploaded_by=uploaded_by,
        )
        job = self._job_repo.enqueue(record.id, raw_input)
        Log.info(f"Queued {raw_input.filename} as job {job.id}", document_id=record.id)
        return record
