import os

# Keep the suite offline: no tracer agent, no real credentials.
os.environ["DD_TRACE_ENABLED"] = "false"
os.environ["DD_INSTRUMENTATION_TELEMETRY_ENABLED"] = "false"
for _name in (
    "ASSEMBLYAI_API_KEY",
    "HUGGING_FACE_TOKEN",
    "PERPLEXITY_API_KEY",
    "GEMINI_API_KEY",
    "USE_FALLBACK_STUBS",
    "ANALYSIS_PROVIDER",
):
    os.environ.pop(_name, None)

import pytest  # noqa: E402

from emoreco.domain import EnrichmentContext, TranscriptionResult  # noqa: E402
from emoreco.domain.metrics import build_audio_metrics  # noqa: E402


@pytest.fixture
def transcription():
    return TranscriptionResult(
        text="one two three four five six",
        confidence=0.92,
        audio_duration=30.0,
        sentiment=[{"text": "one two three", "sentiment": "NEUTRAL"}],
    )


@pytest.fixture
def make_context(transcription):
    def _make(results=None, audio=b"RIFF-audio"):
        return EnrichmentContext(
            audio=audio,
            transcription=transcription,
            metrics=build_audio_metrics(transcription),
            results=results or {},
        )

    return _make
