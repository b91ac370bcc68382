from functools import lru_cache

from app.core.config import settings
from app.services.orchestrator import AadhaarExtractionOrchestrator


@lru_cache()
def get_orchestrator() -> AadhaarExtractionOrchestrator:
    """Dependency providing the shared orchestrator (holds only immutable configuration)."""
    return AadhaarExtractionOrchestrator(settings=settings)
