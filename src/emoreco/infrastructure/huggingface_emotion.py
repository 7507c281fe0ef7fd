"""Hugging Face inference implementation of emotion classification."""

from typing import Any

import httpx

from emoreco.config import HuggingFaceConfig
from emoreco.domain import EMOTIONS_SLOT, EnrichmentContext
from emoreco.domain.placeholders import simulated_emotions
from emoreco.exceptions import NotConfiguredError, RemoteError
from emoreco.logging import setup_logging

from .interfaces import EnrichmentProvider

logger = setup_logging()

PROVIDER_NAME = "Hugging Face"


class HuggingFaceEmotionClassifier(EnrichmentProvider):
    """Classifies vocal emotion from the raw audio clip."""

    name = EMOTIONS_SLOT
    requires = ()

    def __init__(self, client: httpx.AsyncClient, config: HuggingFaceConfig):
        self._client = client
        self._config = config

    @property
    def is_configured(self) -> bool:
        return self._config.is_configured

    async def enrich(self, context: EnrichmentContext) -> Any:
        """Returns the model's label/score list exactly as the API sent it."""
        if not self.is_configured:
            raise NotConfiguredError(PROVIDER_NAME)

        url = f"{self._config.base_url.rstrip('/')}/models/{self._config.model}"
        try:
            response = await self._client.post(
                url,
                content=context.audio,
                headers={
                    "Authorization": f"Bearer {self._config.token}",
                    "Content-Type": self._config.content_type,
                },
                timeout=self._config.timeout_seconds,
            )
            response.raise_for_status()
            emotions = response.json()
        except Exception as e:
            logger.exception(
                "Hugging Face emotion request failed",
                extra={"model": self._config.model},
            )
            raise RemoteError(PROVIDER_NAME, e) from e

        logger.info("Emotion classification completed", extra={"model": self._config.model})
        return emotions

    def placeholder(self, context: EnrichmentContext) -> Any:
        return simulated_emotions()
