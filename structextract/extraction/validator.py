"""Validates the parsed service response and builds extraction records."""

from typing import Any

from structextract.extraction.exceptions import EmptyResultFailure
from structextract.extraction.models import ExtractionRecord
from structextract.extraction.normalization import has_parenthetical, strip_parenthetical

_REQUIRED_FIELDS = ("columnType", "columnDimensions", "mainReinforcement", "hoopReinforcement")


def validate_and_build(data: Any) -> list[ExtractionRecord]:
    """Validate a parsed response and build normalized records.

    Accepts either a bare record array or an object wrapping it under
    ``records``. An empty array is a valid result.

    Raises:
        EmptyResultFailure: if the shape is wrong or any record is malformed.
    """
    items = _unwrap_records(data)
    return [_build_record(item, i) for i, item in enumerate(items)]


def _unwrap_records(data: Any) -> list[Any]:
    if isinstance(data, dict):
        if "records" not in data:
            raise EmptyResultFailure("Response object has no 'records' array")
        data = data["records"]
    if not isinstance(data, list):
        raise EmptyResultFailure("Response must be an array of records")
    return data


def _build_record(raw: Any, index: int) -> ExtractionRecord:
    if not isinstance(raw, dict):
        raise EmptyResultFailure(f"Record at index {index} must be an object")
    for field in _REQUIRED_FIELDS:
        if not isinstance(raw.get(field), str):
            raise EmptyResultFailure(
                f"Record at index {index}: '{field}' must be a string"
            )
    column_type = raw["columnType"].strip()
    if not column_type:
        raise EmptyResultFailure(
            f"Record at index {index}: 'columnType' must be a non-empty string"
        )
    main = strip_parenthetical(raw["mainReinforcement"])
    hoop = strip_parenthetical(raw["hoopReinforcement"])
    if has_parenthetical(main) or has_parenthetical(hoop):
        raise EmptyResultFailure(
            f"Record at index {index}: reinforcement still contains a parenthetical"
        )
    return ExtractionRecord(
        column_type=column_type,
        column_dimensions=raw["columnDimensions"].strip(),
        main_reinforcement=main,
        hoop_reinforcement=hoop,
    )
