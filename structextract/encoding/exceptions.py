class EncodingFailure(Exception):
    """Raised when a source file cannot be read or encoded for transport."""
