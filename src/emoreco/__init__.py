"""Voice analysis relay: transcription, emotion and psychological analysis."""

from emoreco.logging import setup_logging

__all__ = ["setup_logging"]
