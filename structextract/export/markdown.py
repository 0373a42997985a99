from collections.abc import Sequence

from structextract.extraction.models import ExtractionRecord

HEADER = "| File | Column Type | 主筋 | 帯筋 |\n| :--- | :--- | :--- | :--- |"
MISSING_FILE_NAME = "-"


def to_markdown_table(records: Sequence[ExtractionRecord]) -> str:
    """Render consolidated records as a Markdown pipe table.

    Column dimensions are not exported.
    """
    rows = "\n".join(_row(record) for record in records)
    return f"{HEADER}\n{rows}"


def _row(record: ExtractionRecord) -> str:
    file_name = record.source_file_name or MISSING_FILE_NAME
    return (
        f"| {file_name} | {record.column_type} | "
        f"{record.main_reinforcement} | {record.hoop_reinforcement} |"
    )
