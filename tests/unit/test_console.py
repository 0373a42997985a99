import io

from structextract.extraction.models import ExtractionRecord
from structextract.orchestrator.models import BatchSummary, FileEntry, FileStatus
from structextract.presentation.console import (
    VERIFICATION_NOTE,
    StatusPrinter,
    display_width,
    format_entry,
    render_results,
    render_table,
)

_RECORD = ExtractionRecord(
    column_type="C1",
    column_dimensions="770×770",
    main_reinforcement="24-D25",
    hoop_reinforcement="D13@100",
    source_file_name="plan.pdf",
)


class TestFormatEntry:
    def test_pending_is_queued(self) -> None:
        line = format_entry(FileEntry(id="1", file_name="a.pdf"))
        assert line == "[    queued] a.pdf"

    def test_success_shows_count(self) -> None:
        entry = FileEntry(id="1", file_name="a.pdf", status=FileStatus.SUCCESS, records=(_RECORD,))
        assert format_entry(entry).endswith("a.pdf (1 record)")

    def test_success_pluralizes(self) -> None:
        entry = FileEntry(id="1", file_name="a.pdf", status=FileStatus.SUCCESS)
        assert format_entry(entry).endswith("(0 records)")

    def test_error_shows_message(self) -> None:
        entry = FileEntry(id="1", file_name="a.pdf", status=FileStatus.ERROR, error_message="boom")
        assert format_entry(entry) == "[     error] a.pdf: boom"


class TestStatusPrinter:
    def test_prints_only_changes(self) -> None:
        stream = io.StringIO()
        printer = StatusPrinter(stream)
        pending = FileEntry(id="1", file_name="a.pdf")
        printer((pending,))
        printer((pending,))
        printer((FileEntry(id="1", file_name="a.pdf", status=FileStatus.PROCESSING),))
        lines = stream.getvalue().splitlines()
        assert len(lines) == 2
        assert "processing" in lines[1]

    def test_summary_line(self) -> None:
        stream = io.StringIO()
        StatusPrinter(stream).print_summary(BatchSummary(total=3, succeeded=2, failed=1, records=5))
        assert stream.getvalue().strip() == "3 files: 2 succeeded, 1 failed, 5 records extracted"


class TestRenderTable:
    def test_includes_header_and_rows(self) -> None:
        lines = render_table([_RECORD]).splitlines()
        assert lines[0].split(" | ")[0].strip() == "File"
        assert "主筋" in lines[0]
        assert "770×770" in lines[2]
        assert len(lines) == 3

    def test_columns_align_with_wide_characters(self) -> None:
        lines = render_table([_RECORD]).splitlines()
        header_cells = lines[0].split(" | ")
        row_cells = lines[2].split(" | ")
        for header, cell in zip(header_cells[:-1], row_cells[:-1]):
            assert display_width(header) == display_width(cell)


class TestRenderResults:
    def test_count_table_and_note(self) -> None:
        lines = render_results([_RECORD, _RECORD]).splitlines()
        assert lines[0] == "2 Entries"
        assert lines[2].startswith("File")
        assert lines[-1] == VERIFICATION_NOTE
        assert "Zone II" in lines[-1]

    def test_singular_entry(self) -> None:
        assert render_results([_RECORD]).splitlines()[0] == "1 Entry"


class TestDisplayWidth:
    def test_ascii(self) -> None:
        assert display_width("C1") == 2

    def test_wide_characters_count_double(self) -> None:
        assert display_width("主筋") == 4
