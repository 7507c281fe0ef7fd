"""AssemblyAI implementation of the TranscriptionService interface."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import assemblyai as aai
import httpx
from pydantic import ValidationError

from emoreco.config import AssemblyAIConfig
from emoreco.domain.models import JobState, TranscriptionJob, TranscriptionResult
from emoreco.exceptions import (
    ConfigurationError,
    PollTimeoutError,
    RemoteProcessingError,
    SubmissionError,
    UploadError,
)
from emoreco.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()

_COMPLETED = aai.TranscriptStatus.completed.value
_ERROR = aai.TranscriptStatus.error.value


class AssemblyAITranscriber(TranscriptionService):
    """
    Transcribes audio through the AssemblyAI REST API.

    The clip is uploaded, a transcription job with sentiment analysis is
    submitted against the upload URL, and the job is polled at a fixed
    interval until it completes, fails or the attempt budget runs out.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: AssemblyAIConfig,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self._client = client
        self._config = config
        self._sleep = sleep

    @property
    def is_configured(self) -> bool:
        return self._config.is_configured

    async def transcribe(self, audio_data: bytes) -> TranscriptionResult:
        if not self.is_configured:
            raise ConfigurationError("assemblyai")

        audio_url = await self._upload(audio_data)
        job = await self._submit(audio_url)
        return await self._poll(job)

    @property
    def _auth_headers(self) -> dict[str, str]:
        return {"authorization": self._config.api_key}

    def _url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}{path}"

    async def _upload(self, audio_data: bytes) -> str:
        """Uploads raw bytes and returns the resource URL issued for them."""
        try:
            response = await self._client.post(
                self._url("/v2/upload"),
                content=audio_data,
                headers={
                    **self._auth_headers,
                    "content-type": "application/octet-stream",
                },
                timeout=self._config.request_timeout_seconds,
            )
            response.raise_for_status()
            audio_url = response.json()["upload_url"]
        except Exception as e:
            logger.exception("AssemblyAI upload failed", extra={"size": len(audio_data)})
            raise UploadError(e) from e

        logger.info("Audio uploaded", extra={"size": len(audio_data)})
        return audio_url

    async def _submit(self, audio_url: str) -> TranscriptionJob:
        """Creates a transcription job for an uploaded clip."""
        try:
            response = await self._client.post(
                self._url("/v2/transcript"),
                json={
                    "audio_url": audio_url,
                    "sentiment_analysis": self._config.sentiment_analysis,
                    "language_code": self._config.language_code,
                },
                headers=self._auth_headers,
                timeout=self._config.request_timeout_seconds,
            )
            response.raise_for_status()
            job_id = str(response.json()["id"])
        except Exception as e:
            logger.exception("AssemblyAI job submission failed")
            raise SubmissionError(audio_url, e) from e

        logger.info(
            "Transcription job submitted",
            extra={"job_id": job_id, "language_code": self._config.language_code},
        )
        return TranscriptionJob(id=job_id, audio_url=audio_url)

    async def _poll(self, job: TranscriptionJob) -> TranscriptionResult:
        """
        Waits for a job to reach a terminal state.

        Each attempt sleeps for the poll interval, then issues one status
        request.

        Raises:
            RemoteProcessingError: If the job fails upstream, a status request
                fails, or a completed job carries an invalid result.
            PollTimeoutError: If max_poll_attempts pass without a terminal status.
        """
        job.state = JobState.POLLING
        max_attempts = self._config.max_poll_attempts

        for attempt in range(1, max_attempts + 1):
            await self._sleep(self._config.poll_interval_seconds)
            job.attempts = attempt

            payload = await self._fetch_status(job)
            status = payload.get("status")
            logger.info(
                "Transcription status checked",
                extra={"job_id": job.id, "attempt": attempt, "status": status},
            )

            if status == _COMPLETED:
                return self._complete(job, payload)

            if status == _ERROR:
                job.state = JobState.FAILED
                logger.error(
                    "Transcription job failed",
                    extra={"job_id": job.id, "error": payload.get("error")},
                )
                raise RemoteProcessingError(job.id, payload.get("error"))

        job.state = JobState.TIMED_OUT
        logger.error(
            "Transcription polling timed out",
            extra={"job_id": job.id, "attempts": max_attempts},
        )
        raise PollTimeoutError(job.id, max_attempts)

    async def _fetch_status(self, job: TranscriptionJob) -> dict[str, Any]:
        try:
            response = await self._client.get(
                self._url(f"/v2/transcript/{job.id}"),
                headers=self._auth_headers,
                timeout=self._config.request_timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
            if not isinstance(payload, dict):
                raise ValueError("Status response is not a JSON object")
            return payload
        except Exception as e:
            job.state = JobState.FAILED
            logger.exception(
                "AssemblyAI status request failed",
                extra={"job_id": job.id, "attempt": job.attempts},
            )
            raise RemoteProcessingError(
                job.id, f"Failed to fetch transcription status: {e}", cause=e
            ) from e

    def _to_result(self, payload: dict[str, Any]) -> TranscriptionResult:
        return TranscriptionResult(
            text=payload.get("text") or "",
            confidence=payload.get("confidence") or 0.0,
            audio_duration=payload.get("audio_duration") or 0.0,
            sentiment=payload.get("sentiment_analysis_results"),
        )

    def _complete(
        self, job: TranscriptionJob, payload: dict[str, Any]
    ) -> TranscriptionResult:
        try:
            result = self._to_result(payload)
        except ValidationError as e:
            job.state = JobState.FAILED
            logger.error(
                "Completed transcription carries an invalid result",
                extra={"job_id": job.id, "error": str(e)},
            )
            raise RemoteProcessingError(
                job.id, f"Invalid transcription result: {e}", cause=e
            ) from e

        job.state = JobState.COMPLETED
        return result
