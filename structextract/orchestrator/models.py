from dataclasses import dataclass, field
from enum import Enum

from structextract.extraction.models import ExtractionRecord


class FileStatus(str, Enum):
    """Lifecycle of one submitted file."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"

    @property
    def is_terminal(self) -> bool:
        return self in (FileStatus.SUCCESS, FileStatus.ERROR)


@dataclass(frozen=True)
class FileEntry:
    """One tracked unit of work. Replaced, never mutated, on each transition."""

    id: str
    file_name: str
    status: FileStatus = FileStatus.PENDING
    records: tuple[ExtractionRecord, ...] = field(default_factory=tuple)
    error_message: str | None = None


@dataclass(frozen=True)
class BatchSummary:
    """Per-status counts over the tracked entries."""

    total: int = 0
    pending: int = 0
    processing: int = 0
    succeeded: int = 0
    failed: int = 0
    records: int = 0
