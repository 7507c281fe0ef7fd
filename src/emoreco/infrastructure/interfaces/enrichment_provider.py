"""Abstract interface for optional enrichment providers."""

from abc import ABC, abstractmethod
from typing import Any

from emoreco.domain.models import EnrichmentContext


class EnrichmentProvider(ABC):
    """
    A best-effort analysis step run after transcription.

    Each provider fills one output slot of the response, named by `name`.
    `requires` lists the slots whose values must be resolved before the
    provider runs; their values are available in `context.results`.
    """

    name: str
    requires: tuple[str, ...] = ()

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether credentials for the provider are present."""
        pass

    @abstractmethod
    async def enrich(self, context: EnrichmentContext) -> Any:
        """
        Runs the provider against the request context.

        Args:
            context: Audio, transcription, metrics and upstream results.

        Returns:
            The provider's result, passed through to the response verbatim.

        Raises:
            NotConfiguredError: If no credentials are present. No network call is made.
            RemoteError: If the provider call times out or fails.
        """
        pass

    @abstractmethod
    def placeholder(self, context: EnrichmentContext) -> Any:
        """Returns deterministic stand-in data for this provider's slot."""
        pass
