"""Speech metrics computed from transcription output."""

import math

from .models import AudioMetrics, TranscriptionResult


def count_words(text: str | None) -> int:
    """Counts non-empty whitespace-separated tokens."""
    if not text:
        return 0
    return len(text.split())


def words_per_minute(text: str | None, audio_duration: float | None) -> int:
    """
    Speaking rate of a transcript over the clip duration.

    Returns 0 when the duration is zero or absent. Halves round up.
    """
    if not audio_duration:
        return 0
    minutes = audio_duration / 60
    return math.floor(count_words(text) / minutes + 0.5)


def build_audio_metrics(transcription: TranscriptionResult) -> AudioMetrics:
    return AudioMetrics(
        words_per_minute=words_per_minute(
            transcription.text, transcription.audio_duration
        ),
        confidence=transcription.confidence,
        audio_duration=transcription.audio_duration,
        sentiment=transcription.sentiment,
    )
