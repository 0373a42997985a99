"""Plain-text rendering of the per-file status list and the consolidated table."""

import sys
import unicodedata
from collections.abc import Sequence
from typing import TextIO

from structextract.extraction.models import ExtractionRecord
from structextract.orchestrator.models import BatchSummary, FileEntry, FileStatus

TABLE_COLUMNS = ("File", "Column Type", "Dimensions", "主筋", "帯筋")

_STATUS_LABELS = {
    FileStatus.PENDING: "queued",
    FileStatus.PROCESSING: "processing",
    FileStatus.SUCCESS: "success",
    FileStatus.ERROR: "error",
}


def format_entry(entry: FileEntry) -> str:
    """One status-list line for an entry."""
    line = f"[{_STATUS_LABELS[entry.status]:>10}] {entry.file_name}"
    if entry.status is FileStatus.SUCCESS:
        noun = "record" if len(entry.records) == 1 else "records"
        return f"{line} ({len(entry.records)} {noun})"
    if entry.status is FileStatus.ERROR:
        return f"{line}: {entry.error_message}"
    return line


class StatusPrinter:
    """Orchestrator listener that prints a line whenever an entry changes state."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._seen: dict[str, FileStatus] = {}

    def __call__(self, entries: tuple[FileEntry, ...]) -> None:
        current_ids = {entry.id for entry in entries}
        for entry_id in list(self._seen):
            if entry_id not in current_ids:
                del self._seen[entry_id]
        for entry in entries:
            if self._seen.get(entry.id) is entry.status:
                continue
            self._seen[entry.id] = entry.status
            print(format_entry(entry), file=self._stream)

    def print_summary(self, summary: BatchSummary) -> None:
        print(
            f"{summary.total} files: {summary.succeeded} succeeded, "
            f"{summary.failed} failed, {summary.records} records extracted",
            file=self._stream,
        )


VERIFICATION_NOTE = (
    'Note: Data extracted based on "Zone II" (Ⅱゾーン) priority. '
    "Always verify extracted engineering data against the source documents "
    "before construction use."
)


def render_results(records: Sequence[ExtractionRecord]) -> str:
    """Entry count, the consolidated table and the verification note."""
    noun = "Entry" if len(records) == 1 else "Entries"
    return "\n".join(
        [f"{len(records)} {noun}", "", render_table(records), "", VERIFICATION_NOTE]
    )


def render_table(records: Sequence[ExtractionRecord]) -> str:
    """Render the consolidated view as an aligned text table."""
    rows = [
        (
            record.source_file_name or "-",
            record.column_type,
            record.column_dimensions or "-",
            record.main_reinforcement,
            record.hoop_reinforcement,
        )
        for record in records
    ]
    widths = [display_width(title) for title in TABLE_COLUMNS]
    for row in rows:
        widths = [max(w, display_width(cell)) for w, cell in zip(widths, row)]

    lines = [_render_row(TABLE_COLUMNS, widths)]
    lines.append("-+-".join("-" * w for w in widths))
    lines.extend(_render_row(row, widths) for row in rows)
    return "\n".join(lines)


def display_width(text: str) -> int:
    """Terminal column width, counting wide and fullwidth characters as two."""
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)


def _render_row(cells: Sequence[str], widths: Sequence[int]) -> str:
    padded = [cell + " " * (width - display_width(cell)) for cell, width in zip(cells, widths)]
    return " | ".join(padded).rstrip()
