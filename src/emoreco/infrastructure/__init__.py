"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .gemini_analysis import GeminiAnalysisProvider
from .huggingface_emotion import HuggingFaceEmotionClassifier
from .perplexity_analysis import PerplexityAnalysisProvider

__all__ = [
    "AssemblyAITranscriber",
    "GeminiAnalysisProvider",
    "HuggingFaceEmotionClassifier",
    "PerplexityAnalysisProvider",
]
