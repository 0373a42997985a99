class ExtractionError(Exception):
    """Raised when extraction for a single document fails."""


class ServiceFailure(ExtractionError):
    """Raised when the extraction service call fails or cannot be reached."""


class EmptyResultFailure(ExtractionError):
    """Raised when the service answers without a usable record array."""
