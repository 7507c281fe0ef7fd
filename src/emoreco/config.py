"""Application configuration loaded from environment variables."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

_TRUE_VALUES = {"1", "true", "yes", "on"}


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI transcription API configuration."""

    api_key: str = ""
    base_url: str = "https://api.assemblyai.com"
    language_code: str = "en"
    sentiment_analysis: bool = True
    request_timeout_seconds: float = 30.0
    poll_interval_seconds: float = 3.0
    max_poll_attempts: int = 30

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


class HuggingFaceConfig(BaseModel, frozen=True):
    """Hugging Face inference API configuration for emotion classification."""

    token: str = ""
    base_url: str = "https://api-inference.huggingface.co"
    model: str = "superb/hubert-large-superb-er"
    content_type: str = "audio/flac"
    timeout_seconds: float = 15.0

    @property
    def is_configured(self) -> bool:
        return bool(self.token)


class PerplexityConfig(BaseModel, frozen=True):
    """Perplexity chat completions configuration."""

    api_key: str = ""
    base_url: str = "https://api.perplexity.ai"
    model: str = "sonar-reasoning"
    temperature: float = 0.2
    max_tokens: int = 2000
    timeout_seconds: float = 15.0

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


class GeminiConfig(BaseModel, frozen=True):
    """Gemini LLM configuration."""

    api_key: str = ""
    model_name: str = "gemini-2.5-flash-lite"
    timeout_seconds: float = 15.0

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3001
    max_upload_bytes: int = 10 * 1024 * 1024
    cors_origins: tuple[str, ...] = ("*",)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    assemblyai: AssemblyAIConfig = AssemblyAIConfig()
    huggingface: HuggingFaceConfig = HuggingFaceConfig()
    perplexity: PerplexityConfig = PerplexityConfig()
    gemini: GeminiConfig = GeminiConfig()
    server: ServerConfig = ServerConfig()
    analysis_provider: Literal["perplexity", "gemini"] = "perplexity"
    use_fallback_stubs: bool = False
    system_prompt_path: Path = Path(__file__).parent / "prompts" / "system.txt"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_list(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            base_url=os.getenv("ASSEMBLYAI_BASE_URL", "https://api.assemblyai.com"),
            language_code=os.getenv("ASSEMBLYAI_LANGUAGE_CODE", "en"),
        ),
        huggingface=HuggingFaceConfig(
            token=os.getenv("HUGGING_FACE_TOKEN", ""),
            model=os.getenv("HUGGING_FACE_MODEL", "superb/hubert-large-superb-er"),
        ),
        perplexity=PerplexityConfig(
            api_key=os.getenv("PERPLEXITY_API_KEY", ""),
            model=os.getenv("PERPLEXITY_MODEL", "sonar-reasoning"),
        ),
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite"),
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3001")),
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024))),
            cors_origins=_env_list("CORS_ORIGINS", "*"),
        ),
        analysis_provider=os.getenv("ANALYSIS_PROVIDER", "perplexity").lower(),
        use_fallback_stubs=_env_flag("USE_FALLBACK_STUBS"),
    )
