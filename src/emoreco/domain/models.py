"""Domain models for voice analysis."""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class JobState(str, Enum):
    """Lifecycle of a transcription job as seen by the client."""

    SUBMITTED = "submitted"
    POLLING = "polling"
    COMPLETED = "completed"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


class OrchestrationState(str, Enum):
    """Stages a single analysis request moves through."""

    IDLE = "idle"
    TRANSCRIBING = "transcribing"
    ENRICHING = "enriching"
    ASSEMBLING = "assembling"
    DONE = "done"
    FAILED = "failed"


class TranscriptionJob(BaseModel):
    """A job issued by the transcription service."""

    id: str
    audio_url: str
    state: JobState = JobState.SUBMITTED
    attempts: int = 0


class TranscriptionResult(BaseModel, frozen=True):
    """Completed transcription with the metadata the relay reports."""

    text: str
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    audio_duration: float = Field(default=0.0, ge=0.0)
    sentiment: Any = None


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class AudioMetrics(_CamelModel):
    """Speech metrics derived from a transcription."""

    words_per_minute: int
    confidence: float
    audio_duration: float
    sentiment: Any = None


class AnalysisResponse(_CamelModel):
    """Aggregated result returned for a successfully analyzed clip."""

    success: Literal[True] = True
    transcript: str
    audio_metrics: AudioMetrics
    emotions: Any = None
    detailed_analysis: Any = None


class ErrorResponse(_CamelModel):
    """Failure result; status_code classifies it but is not serialized."""

    success: Literal[False] = False
    error: str
    status_code: int = Field(default=500, exclude=True)


class ServiceAvailability(_CamelModel):
    """Which external services have credentials configured."""

    transcription: bool
    emotion: bool
    generative_analysis: bool


class EnrichmentContext(BaseModel, frozen=True):
    """
    Input handed to every enrichment provider.

    `results` maps the output slot of each provider resolved so far to its
    value, which may be a real result, an error object or a placeholder.
    """

    audio: bytes
    transcription: TranscriptionResult
    metrics: AudioMetrics
    results: dict[str, Any] = Field(default_factory=dict)
