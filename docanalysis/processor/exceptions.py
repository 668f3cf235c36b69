class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class AnalysisFailedError(ProcessorError):
    """Raised when a pipeline stage fails for a reason other than an unsupported format."""

    def __init__(self, document_id: object, stage: str, cause: Exception) -> None:
        self.document_id = document_id
        self.stage = stage
        self.cause = cause
        super().__init__(f"Analysis of document {document_id} failed in {stage}: {cause}")


class FileReadError(ProcessorError):
    """Raised when a file cannot be read from disk."""
