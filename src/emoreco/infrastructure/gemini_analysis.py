"""Gemini implementation of the detailed report."""

import asyncio
import json
from typing import Any

from google import genai

from emoreco.config import GeminiConfig
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

PROVIDER_NAME = "Gemini"


class GeminiAnalysisProvider(EnrichmentProvider):
    """Requests a psychological assessment of the clip from Google Gemini."""

    name = REPORT_SLOT
    requires = (EMOTIONS_SLOT,)

    def __init__(
        self, client: genai.Client | None, config: GeminiConfig, system_prompt: str
    ):
        self._client = client
        self._config = config
        self._system_prompt = system_prompt

    @property
    def is_configured(self) -> bool:
        return self._client is not None and self._config.is_configured

    async def enrich(self, context: EnrichmentContext) -> Any:
        """
        Generates the report as JSON.

        Returns:
            The parsed JSON report, or {"report": text} when the model
            answers with plain text.

        Raises:
            NotConfiguredError: If no API key is configured.
            RemoteError: If the call fails, times out or returns nothing.
        """
        if not self.is_configured:
            raise NotConfiguredError(PROVIDER_NAME)

        try:
            response = await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=self._config.model_name,
                    contents=build_report_prompt(context),
                    config={
                        "response_mime_type": "application/json",
                        "system_instruction": self._system_prompt,
                    },
                ),
                timeout=self._config.timeout_seconds,
            )
            if not response.text:
                raise ValueError("Gemini returned empty response")
        except Exception as e:
            logger.exception(
                "Gemini analysis request failed",
                extra={"model": self._config.model_name},
            )
            raise RemoteError(PROVIDER_NAME, e) from e

        logger.info(
            "Detailed analysis completed", extra={"model": self._config.model_name}
        )
        return _parse_report(response.text)

    def placeholder(self, context: EnrichmentContext) -> Any:
        return simulated_report()


def _parse_report(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return {"report": text}
