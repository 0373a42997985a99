from structextract.extraction.base import BaseExtractor
from structextract.extraction.exceptions import (
    EmptyResultFailure,
    ExtractionError,
    ServiceFailure,
)
from structextract.extraction.extractor import Extractor
from structextract.extraction.factory import ExtractorFactory
from structextract.extraction.models import ExtractionRecord
from structextract.extraction.normalization import strip_parenthetical

__all__ = [
    "BaseExtractor",
    "EmptyResultFailure",
    "ExtractionError",
    "ExtractionRecord",
    "Extractor",
    "ExtractorFactory",
    "ServiceFailure",
    "strip_parenthetical",
]
