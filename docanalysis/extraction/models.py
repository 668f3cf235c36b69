from dataclasses import dataclass, field
from pathlib import PurePath


@dataclass(frozen=True)
class RawInput:
    """An uploaded file captured for a single analysis call."""

    filename: str
    payload: bytes = field(repr=False)
    size: int = -1
    declared_type: str = ""

    def __post_init__(self) -> None:
        if self.size < 0:
            object.__setattr__(self, "size", len(self.payload))

    @property
    def extension(self) -> str:
        """Lowercased filename suffix without the dot.

        Falls back to the declared type (its MIME subtype when it has one)
        for filenames without a suffix.
        """
        suffix = PurePath(self.filename).suffix
        if suffix:
            return suffix[1:].lower()
        return self.declared_type.rsplit("/", 1)[-1].strip().lower()
