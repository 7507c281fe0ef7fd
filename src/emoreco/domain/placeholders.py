"""Deterministic stand-in data used when fallback stubs are enabled."""

from typing import Any

from .models import TranscriptionResult

SIMULATED_TRANSCRIPT = (
    "I'm telling you, I really didn't know about the meeting. It must have been "
    "a communication error somewhere in the system. I would never intentionally "
    "miss something that important."
)


def simulated_transcription() -> TranscriptionResult:
    return TranscriptionResult(
        text=SIMULATED_TRANSCRIPT,
        confidence=0.85,
        audio_duration=30.0,
        sentiment={"text": "neutral"},
    )


def simulated_emotions() -> list[dict[str, Any]]:
    return [
        {"label": "neutral", "score": 0.45},
        {"label": "fear", "score": 0.25},
        {"label": "sadness", "score": 0.15},
        {"label": "anger", "score": 0.08},
        {"label": "surprise", "score": 0.05},
        {"label": "disgust", "score": 0.02},
    ]


def simulated_report() -> dict[str, Any]:
    return {
        "truthScore": 63,
        "confidence": 78,
        "summary": (
            "The speaker shows moderate truthfulness with some indicators of "
            "potential deception. There are inconsistencies between vocal "
            "patterns and content."
        ),
        "detailedAnalysis": [
            {
                "title": "Emotional Analysis",
                "content": (
                    "The speaker displays primarily neutral affect with underlying "
                    "fear and sadness. This emotional profile may indicate anxiety "
                    "about the topic or potential consequences."
                ),
            },
            {
                "title": "Communication Patterns",
                "content": (
                    "Speech shows moderate pace with occasional hesitations. The "
                    "tone is somewhat tentative, suggesting uncertainty or lack of "
                    "confidence in the statements being made."
                ),
            },
        ],
    }


def error_placeholder(message: str) -> dict[str, str]:
    """Tagged failure value written into an enrichment slot."""
    return {"error": message}
