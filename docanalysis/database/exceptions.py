class RepositoryError(Exception):
    """Base exception for record-store errors."""


class DocumentNotFoundError(RepositoryError):
    """Raised when a document cannot be found in the store."""


class JobNotFoundError(RepositoryError):
    """Raised when an upload job cannot be found in the store."""
