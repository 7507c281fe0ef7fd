"""Orchestrates transcription and enrichment of one audio clip."""

import asyncio
import uuid
from collections.abc import Sequence
from typing import Any

from emoreco.domain import (
    EMOTIONS_SLOT,
    REPORT_SLOT,
    AnalysisResponse,
    AudioMetrics,
    EnrichmentContext,
    ErrorResponse,
    OrchestrationState,
    ServiceAvailability,
    TranscriptionResult,
    build_audio_metrics,
)
from emoreco.domain.placeholders import error_placeholder, simulated_transcription
from emoreco.exceptions import (
    ConfigurationError,
    EnrichmentError,
    MissingInputError,
    PollTimeoutError,
    RemoteProcessingError,
    TranscriptionError,
)
from emoreco.infrastructure.interfaces import EnrichmentProvider, TranscriptionService
from emoreco.logging import setup_logging

logger = setup_logging()


class AnalysisOrchestrator:
    """
    Runs transcription, then enrichment, then assembles the response.

    Transcription is mandatory: its failure fails the request unless
    fallback stubs are enabled. Enrichment providers are best-effort and
    run in dependency stages; providers within a stage run concurrently.
    """

    def __init__(
        self,
        transcription_service: TranscriptionService,
        providers: Sequence[EnrichmentProvider] = (),
        use_fallback_stubs: bool = False,
    ):
        names = [p.name for p in providers]
        duplicates = {n for n in names if names.count(n) > 1}
        if duplicates:
            raise ValueError(f"Duplicate enrichment slots: {sorted(duplicates)}")

        self._transcription = transcription_service
        self._providers = tuple(providers)
        self._use_fallback_stubs = use_fallback_stubs

    def service_availability(self) -> ServiceAvailability:
        """Reports which external services have credentials configured."""
        configured = {p.name: p.is_configured for p in self._providers}
        return ServiceAvailability(
            transcription=self._transcription.is_configured,
            emotion=configured.get(EMOTIONS_SLOT, False),
            generative_analysis=configured.get(REPORT_SLOT, False),
        )

    async def analyze_audio(
        self, audio_data: bytes | None
    ) -> AnalysisResponse | ErrorResponse:
        """
        Analyzes one audio clip.

        Args:
            audio_data: Raw bytes of the uploaded file.

        Returns:
            AnalysisResponse on success, otherwise ErrorResponse with a
            status code of 400 (bad input) or 500 (server or dependency).
        """
        request_id = uuid.uuid4().hex
        self._transition(request_id, OrchestrationState.IDLE)

        try:
            return await self._run(request_id, audio_data)
        except MissingInputError as e:
            return self._fail(request_id, str(e), 400)
        except ConfigurationError as e:
            logger.error(
                "Transcription service not configured",
                extra={"request_id": request_id, "service": e.service},
            )
            return self._fail(request_id, "Server configuration error", 500)
        except PollTimeoutError:
            return self._fail(
                request_id, "Processing timeout - audio too long or server busy", 500
            )
        except RemoteProcessingError as e:
            return self._fail(
                request_id, f"Audio processing failed: {e.upstream_message}", 500
            )
        except TranscriptionError as e:
            return self._fail(request_id, str(e), 500)
        except Exception:
            logger.exception("Analysis failed", extra={"request_id": request_id})
            return self._fail(request_id, "Internal server error", 500)

    async def _run(self, request_id: str, audio_data: bytes | None) -> AnalysisResponse:
        if not audio_data:
            raise MissingInputError()

        logger.info(
            "Processing audio",
            extra={"request_id": request_id, "size": len(audio_data)},
        )

        self._transition(request_id, OrchestrationState.TRANSCRIBING)
        transcription = await self._transcribe(request_id, audio_data)
        metrics = build_audio_metrics(transcription)

        self._transition(request_id, OrchestrationState.ENRICHING)
        results = await self._enrich(request_id, audio_data, transcription, metrics)

        self._transition(request_id, OrchestrationState.ASSEMBLING)
        response = AnalysisResponse(
            transcript=transcription.text,
            audio_metrics=metrics,
            emotions=results.get(EMOTIONS_SLOT),
            detailed_analysis=results.get(REPORT_SLOT),
        )

        self._transition(request_id, OrchestrationState.DONE)
        return response

    async def _transcribe(
        self, request_id: str, audio_data: bytes
    ) -> TranscriptionResult:
        try:
            return await self._transcription.transcribe(audio_data)
        except (ConfigurationError, TranscriptionError) as e:
            if not self._use_fallback_stubs:
                raise
            logger.warning(
                "Transcription unavailable, using placeholder transcript",
                extra={"request_id": request_id, "error": str(e)},
            )
            return simulated_transcription()

    async def _enrich(
        self,
        request_id: str,
        audio_data: bytes,
        transcription: TranscriptionResult,
        metrics: AudioMetrics,
    ) -> dict[str, Any]:
        """
        Resolves every provider's slot, stage by stage.

        A requirement is met once its slot is resolved, or immediately when
        no wired provider produces that slot. Providers left waiting on each
        other are resolved to an error object without running.
        """
        produced = {p.name for p in self._providers}
        results: dict[str, Any] = {}
        pending = list(self._providers)

        while pending:
            ready = [
                p
                for p in pending
                if all(r in results or r not in produced for r in p.requires)
            ]
            if not ready:
                for provider in pending:
                    waiting_on = [r for r in provider.requires if r not in results]
                    logger.error(
                        "Enrichment provider has unresolvable requirements",
                        extra={
                            "request_id": request_id,
                            "provider": provider.name,
                            "requires": waiting_on,
                        },
                    )
                    results[provider.name] = error_placeholder(
                        f"{provider.name} requires unresolved results: "
                        + ", ".join(waiting_on)
                    )
                break

            context = EnrichmentContext(
                audio=audio_data,
                transcription=transcription,
                metrics=metrics,
                results=dict(results),
            )
            values = await asyncio.gather(
                *(self._run_provider(request_id, p, context) for p in ready)
            )
            for provider, value in zip(ready, values):
                results[provider.name] = value
            pending = [p for p in pending if p not in ready]

        return results

    async def _run_provider(
        self, request_id: str, provider: EnrichmentProvider, context: EnrichmentContext
    ) -> Any:
        try:
            return await provider.enrich(context)
        except EnrichmentError as e:
            logger.warning(
                "Enrichment provider unavailable",
                extra={
                    "request_id": request_id,
                    "provider": provider.name,
                    "error": str(e),
                },
            )
            message = str(e)
        except Exception as e:
            logger.exception(
                "Enrichment provider crashed",
                extra={"request_id": request_id, "provider": provider.name},
            )
            message = f"{provider.name} failed: {e}"

        if self._use_fallback_stubs:
            return provider.placeholder(context)
        return error_placeholder(message)

    def _fail(self, request_id: str, message: str, status_code: int) -> ErrorResponse:
        self._transition(request_id, OrchestrationState.FAILED, error=message)
        return ErrorResponse(error=message, status_code=status_code)

    def _transition(
        self, request_id: str, state: OrchestrationState, **extra: Any
    ) -> None:
        logger.info(
            "Analysis state changed",
            extra={"request_id": request_id, "state": state.value, **extra},
        )
