import threading
import uuid
from dataclasses import replace

from docanalysis.database.exceptions import DocumentNotFoundError
from docanalysis.database.models import DocumentRecord, utc_now


class DocumentRepository:
    """In-memory key-value store of document records, keyed by document id.

    Records handed out are copies; all writes go through the methods below.
    """

    def __init__(self) -> None:
        self._records: dict[str, DocumentRecord] = {}
        self._lock = threading.Lock()

    def create(
        self,
        *,
        name: str,
        file_type: str,
        category: str,
        size_bytes: int,
        uploaded_by: str,
        description: str = "",
    ) -> DocumentRecord:
        """Insert a new record in Processing state and return it."""
        record = DocumentRecord(
            id=str(uuid.uuid4()),
            name=name,
            file_type=file_type,
            category=category,
            size_bytes=size_bytes,
            uploaded_by=uploaded_by,
            description=description,
        )
        with self._lock:
            self._records[record.id] = record
        return replace(record)

    def find_by_id(self, document_id: str) -> DocumentRecord:
        """Find a document record by ID.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        with self._lock:
            record = self._records.get(document_id)
            if record is None:
                raise DocumentNotFoundError(f"Document {document_id} not found")
            return replace(record, tags=list(record.tags))

    def list_all(self) -> list[DocumentRecord]:
        with self._lock:
            return [replace(r, tags=list(r.tags)) for r in self._records.values()]

    def mark_processed(
        self,
        document_id: str,
        *,
        category: str,
        tags: list[str],
        description: str,
        analysis: dict[str, object],
    ) -> None:
        """Store a successful analysis on the record."""
        self._update(
            document_id,
            status="Processed",
            category=category,
            tags=list(tags),
            description=description,
            analysis=analysis,
            error_message=None,
            processed_at=utc_now(),
        )

    def mark_degraded(self, document_id: str, *, tags: list[str], error: str) -> None:
        """Mark the record processed without analysis, keeping the failure reason."""
        self._update(
            document_id,
            status="Processed",
            tags=list(tags),
            analysis=None,
            error_message=error,
            processed_at=utc_now(),
        )

    def _update(self, document_id: str, **changes: object) -> None:
        with self._lock:
            record = self._records.get(document_id)
            if record is None:
                raise DocumentNotFoundError(f"Document {document_id} not found")
            self._records[document_id] = replace(record, updated_at=utc_now(), **changes)
