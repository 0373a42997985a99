class ConfigurationError(Exception):
    """Raised at startup when the extraction service cannot be configured."""
