"""Perplexity chat-completions implementation of the detailed report."""

from typing import Any

import httpx

from emoreco.config import PerplexityConfig
from emoreco.domain import (
    EMOTIONS_SLOT,
    REPORT_SLOT,
    EnrichmentContext,
    build_report_prompt,
)
from emoreco.domain.placeholders import simulated_report
from emoreco.exceptions import NotConfiguredError, RemoteError
from emoreco.logging import setup_logging

from .interfaces import EnrichmentProvider

logger = setup_logging()

PROVIDER_NAME = "Perplexity AI"


class PerplexityAnalysisProvider(EnrichmentProvider):
    """Requests a psychological assessment of the clip from Perplexity."""

    name = REPORT_SLOT
    requires = (EMOTIONS_SLOT,)

    def __init__(
        self, client: httpx.AsyncClient, config: PerplexityConfig, system_prompt: str
    ):
        self._client = client
        self._config = config
        self._system_prompt = system_prompt

    @property
    def is_configured(self) -> bool:
        return self._config.is_configured

    async def enrich(self, context: EnrichmentContext) -> Any:
        """
        Sends the transcript, metrics, sentiment and emotions for analysis.

        Returns:
            The chat-completions response body, unmodified.

        Raises:
            NotConfiguredError: If no API key is configured.
            RemoteError: If the request fails or times out.
        """
        if not self.is_configured:
            raise NotConfiguredError(PROVIDER_NAME)

        body = {
            "model": self._config.model,
            "messages": [
                {"role": "system", "content": self._system_prompt},
                {"role": "user", "content": build_report_prompt(context)},
            ],
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
        }

        try:
            response = await self._client.post(
                f"{self._config.base_url.rstrip('/')}/chat/completions",
                json=body,
                headers={"Authorization": f"Bearer {self._config.api_key}"},
                timeout=self._config.timeout_seconds,
            )
            response.raise_for_status()
            report = response.json()
        except Exception as e:
            logger.exception(
                "Perplexity analysis request failed",
                extra={"model": self._config.model},
            )
            raise RemoteError(PROVIDER_NAME, e) from e

        logger.info("Detailed analysis completed", extra={"model": self._config.model})
        return report

    def placeholder(self, context: EnrichmentContext) -> Any:
        return simulated_report()
