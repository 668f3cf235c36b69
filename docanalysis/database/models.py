from dataclasses import dataclass, field
from datetime import datetime, timezone

from docanalysis.extraction.models import RawInput


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class UploadJob:
    """A queued analysis of one uploaded file."""

    id: int
    document_id: str
    raw_input: RawInput
    status: str = "pending"  # pending | processing | done | failed
    attempts: int = 0
    error_message: str | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)


@dataclass
class DocumentRecord:
    """The stored view of an uploaded document."""

    id: str
    name: str
    file_type: str
    category: str
    size_bytes: int
    uploaded_by: str
    status: str = "Processing"  # Processing | Processed
    tags: list[str] = field(default_factory=list)
    description: str = ""
    analysis: dict[str, object] | None = None
    error_message: str | None = None
    processed_at: datetime | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
