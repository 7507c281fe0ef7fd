"""Infrastructure interface exports."""

from .enrichment_provider import EnrichmentProvider
from .transcription_service import TranscriptionService

__all__ = ["EnrichmentProvider", "TranscriptionService"]
