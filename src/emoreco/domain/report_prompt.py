"""Builds the analysis request sent to generative report providers."""

import json
from typing import Any

from .models import EnrichmentContext

EMOTIONS_SLOT = "emotions"
REPORT_SLOT = "detailedAnalysis"


def build_report_payload(context: EnrichmentContext) -> dict[str, Any]:
    """
    Collects everything known about the clip into one structure.

    Missing upstream results are passed as whatever their slot resolved
    to, so the provider still receives partial data.
    """
    metrics = context.metrics
    return {
        "TRANSCRIPT": context.transcription.text,
        "AUDIO_INTELLIGENCE": {
            "speech_metrics": {
                "wordsPerMinute": metrics.words_per_minute,
                "confidence": metrics.confidence,
                "audioDuration": metrics.audio_duration,
            },
            "sentiment_analysis": metrics.sentiment or {},
        },
        "EMOTION_ANALYSIS": context.results.get(EMOTIONS_SLOT),
    }


def build_report_prompt(context: EnrichmentContext) -> str:
    payload = json.dumps(build_report_payload(context), indent=2)
    return f"DETAILED AI ANALYSIS REQUEST:\n\nANALYSIS DATA:\n{payload}\n"
