from structextract.orchestrator.exceptions import InvalidTransitionError, OrchestratorError
from structextract.orchestrator.models import BatchSummary, FileEntry, FileStatus
from structextract.orchestrator.orchestrator import BatchOrchestrator
from structextract.orchestrator.transitions import apply_transition

__all__ = [
    "BatchOrchestrator",
    "BatchSummary",
    "FileEntry",
    "FileStatus",
    "InvalidTransitionError",
    "OrchestratorError",
    "apply_transition",
]
