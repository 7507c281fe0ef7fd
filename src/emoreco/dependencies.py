"""Dependency injection configuration for the voice analysis relay."""

import httpx
from google import genai

from emoreco.config import AppConfig, load_config
from emoreco.handlers import AnalysisOrchestrator
from emoreco.infrastructure import (
    AssemblyAITranscriber,
    GeminiAnalysisProvider,
    HuggingFaceEmotionClassifier,
    PerplexityAnalysisProvider,
)
from emoreco.infrastructure.interfaces import EnrichmentProvider
from emoreco.logging import setup_logging

logger = setup_logging()


def build_analysis_provider(
    config: AppConfig, client: httpx.AsyncClient, system_prompt: str
) -> EnrichmentProvider:
    """Returns the generative report provider selected by ANALYSIS_PROVIDER."""
    if config.analysis_provider == "gemini":
        gemini_client = (
            genai.Client(api_key=config.gemini.api_key)
            if config.gemini.is_configured
            else None
        )
        return GeminiAnalysisProvider(gemini_client, config.gemini, system_prompt)
    return PerplexityAnalysisProvider(client, config.perplexity, system_prompt)


def build_orchestrator(
    config: AppConfig, client: httpx.AsyncClient, system_prompt: str
) -> AnalysisOrchestrator:
    """Wires the transcriber and every enrichment provider from config."""
    return AnalysisOrchestrator(
        AssemblyAITranscriber(client, config.assemblyai),
        providers=[
            HuggingFaceEmotionClassifier(client, config.huggingface),
            build_analysis_provider(config, client, system_prompt),
        ],
        use_fallback_stubs=config.use_fallback_stubs,
    )


_config = load_config()

_http_client = httpx.AsyncClient()

_system_prompt = _config.system_prompt_path.read_text(encoding="utf-8")

_orchestrator = build_orchestrator(_config, _http_client, _system_prompt)

logger.info(
    "Services configured",
    extra={
        **_orchestrator.service_availability().model_dump(),
        "analysis_provider": _config.analysis_provider,
        "use_fallback_stubs": _config.use_fallback_stubs,
    },
)


def get_config() -> AppConfig:
    """Returns the application configuration."""
    return _config


def get_orchestrator() -> AnalysisOrchestrator:
    """Returns the configured analysis orchestrator."""
    return _orchestrator


async def close_http_client() -> None:
    """Closes the shared HTTP connection pool."""
    await _http_client.aclose()
