"""Domain layer exports."""

from .metrics import build_audio_metrics, count_words, words_per_minute
from .models import (
    AnalysisResponse,
    AudioMetrics,
    EnrichmentContext,
    ErrorResponse,
    JobState,
    OrchestrationState,
    ServiceAvailability,
    TranscriptionJob,
    TranscriptionResult,
)
from .report_prompt import (
    EMOTIONS_SLOT,
    REPORT_SLOT,
    build_report_payload,
    build_report_prompt,
)

__all__ = [
    "AnalysisResponse",
    "AudioMetrics",
    "EnrichmentContext",
    "ErrorResponse",
    "JobState",
    "OrchestrationState",
    "ServiceAvailability",
    "TranscriptionJob",
    "TranscriptionResult",
    "EMOTIONS_SLOT",
    "REPORT_SLOT",
    "build_audio_metrics",
    "build_report_payload",
    "build_report_prompt",
    "count_words",
    "words_per_minute",
]
