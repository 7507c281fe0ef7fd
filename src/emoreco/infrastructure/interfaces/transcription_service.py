"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from emoreco.domain.models import TranscriptionResult


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether credentials for the backend are present."""
        pass

    @abstractmethod
    async def transcribe(self, audio_data: bytes) -> TranscriptionResult:
        """
        Transcribes audio data and returns text with speech metadata.

        Args:
            audio_data: Raw audio file bytes.

        Returns:
            TranscriptionResult with text, confidence, duration and sentiment.

        Raises:
            ConfigurationError: If no credentials are configured.
            UploadError: If the audio upload fails.
            SubmissionError: If the transcription job cannot be created.
            PollTimeoutError: If the job does not finish within the poll budget.
            RemoteProcessingError: If the service reports the job as failed.
        """
        pass
