"""Pure state-machine transitions over the tracked entry collection."""

from collections.abc import Iterable
from dataclasses import replace

from structextract.extraction.models import ExtractionRecord
from structextract.orchestrator.exceptions import InvalidTransitionError
from structextract.orchestrator.models import FileEntry, FileStatus

ALLOWED_TRANSITIONS: dict[FileStatus, frozenset[FileStatus]] = {
    FileStatus.PENDING: frozenset({FileStatus.PROCESSING}),
    FileStatus.PROCESSING: frozenset({FileStatus.SUCCESS, FileStatus.ERROR}),
    FileStatus.SUCCESS: frozenset(),
    FileStatus.ERROR: frozenset(),
}


def apply_transition(
    entries: tuple[FileEntry, ...],
    entry_id: str,
    status: FileStatus,
    *,
    records: Iterable[ExtractionRecord] = (),
    error_message: str | None = None,
) -> tuple[FileEntry, ...]:
    """Return a new collection with only ``entry_id`` moved to ``status``.

    An id that is no longer tracked (e.g. after a bulk clear) leaves the
    collection untouched and returns it as-is.

    Raises:
        InvalidTransitionError: if the lifecycle forbids the move, or an
            ERROR transition carries no message.
    """
    for index, entry in enumerate(entries):
        if entry.id == entry_id:
            updated = _transition(entry, status, tuple(records), error_message)
            return entries[:index] + (updated,) + entries[index + 1:]
    return entries


def _transition(
    entry: FileEntry,
    status: FileStatus,
    records: tuple[ExtractionRecord, ...],
    error_message: str | None,
) -> FileEntry:
    if status not in ALLOWED_TRANSITIONS[entry.status]:
        raise InvalidTransitionError(
            f"Entry {entry.id} ({entry.file_name}) cannot move "
            f"from {entry.status.value} to {status.value}"
        )
    if status is FileStatus.SUCCESS:
        return replace(entry, status=status, records=records, error_message=None)
    if status is FileStatus.ERROR:
        if not error_message:
            raise InvalidTransitionError(
                f"Entry {entry.id} ({entry.file_name}) needs an error message"
            )
        return replace(entry, status=status, records=(), error_message=error_message)
    return replace(entry, status=status)
