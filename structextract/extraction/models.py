from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionRecord:
    """One column specification read from a reinforcement schedule."""

    column_type: str
    column_dimensions: str
    main_reinforcement: str
    hoop_reinforcement: str
    source_file_name: str | None = None
