"""Custom exceptions for the voice analysis relay."""


class MissingInputError(Exception):
    """Raised when a request carries no audio payload."""

    def __init__(self):
        super().__init__("No audio file provided")


class ConfigurationError(Exception):
    """Raised when a required service has no credentials configured."""

    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Service '{service}' is not configured")


class TranscriptionError(Exception):
    """Base class for failures on the transcription path."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class UploadError(TranscriptionError):
    """Raised when uploading audio to the transcription service fails."""

    def __init__(self, cause: Exception | None = None):
        super().__init__("Failed to upload audio for transcription", cause)


class SubmissionError(TranscriptionError):
    """Raised when the transcription job cannot be created."""

    def __init__(self, audio_url: str, cause: Exception | None = None):
        self.audio_url = audio_url
        super().__init__("Failed to submit transcription job", cause)


class PollTimeoutError(TranscriptionError):
    """Raised when a job does not reach a terminal state within the poll budget."""

    def __init__(self, job_id: str, attempts: int):
        self.job_id = job_id
        self.attempts = attempts
        super().__init__(
            f"Transcription job '{job_id}' did not finish after {attempts} attempts"
        )


class RemoteProcessingError(TranscriptionError):
    """Raised when the transcription service reports a failed job."""

    def __init__(
        self,
        job_id: str,
        upstream_message: str | None,
        cause: Exception | None = None,
    ):
        self.job_id = job_id
        self.upstream_message = upstream_message or "Unknown error"
        super().__init__(self.upstream_message, cause)


class EnrichmentError(Exception):
    """Base class for failures of an optional enrichment provider."""

    def __init__(self, provider: str, message: str, cause: Exception | None = None):
        self.provider = provider
        self.cause = cause
        super().__init__(message)


class NotConfiguredError(EnrichmentError):
    """Raised when an enrichment provider has no credentials."""

    def __init__(self, provider: str):
        super().__init__(provider, f"{provider} not configured")


class RemoteError(EnrichmentError):
    """Raised when an enrichment provider call times out or fails."""

    def __init__(self, provider: str, cause: Exception | None = None):
        detail = f": {str(cause) or type(cause).__name__}" if cause else ""
        super().__init__(provider, f"{provider} request failed{detail}", cause)
