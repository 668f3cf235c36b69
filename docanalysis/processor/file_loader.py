import mimetypes
from pathlib import Path

from docanalysis.extraction.models import RawInput
from docanalysis.processor.exceptions import FileReadError


class FileLoader:
    """Reads an upload from disk into a RawInput."""

    def __init__(self, files_root: Path | None = None) -> None:
        self._files_root = files_root if files_root is not None else Path.cwd()

    def load(self, path: Path | str) -> RawInput:
        """Read file bytes, resolving relative paths against the files root.

        Raises:
            FileNotFoundError: if the file does not exist at resolved path.
            FileReadError: if the file exists but cannot be read.
        """
        resolved = self._resolve_path(Path(path))
        if not resolved.is_file():
            raise FileNotFoundError(f"File not found: {resolved}")
        try:
            payload = resolved.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read {resolved}: {exc}") from exc
        declared_type, _encoding = mimetypes.guess_type(resolved.name)
        return RawInput(
            filename=resolved.name,
            payload=payload,
            size=len(payload),
            declared_type=declared_type or "",
        )

    def _resolve_path(self, path: Path) -> Path:
        return path if path.is_absolute() else self._files_root / path
