class OrchestratorError(Exception):
    """Base exception for batch orchestration errors."""


class InvalidTransitionError(OrchestratorError):
    """Raised when a file entry is moved along an edge the lifecycle forbids."""
