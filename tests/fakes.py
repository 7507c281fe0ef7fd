"""In-memory stand-ins for the transcription service and providers."""

import asyncio

from emoreco.exceptions import NotConfiguredError
from emoreco.infrastructure.interfaces import EnrichmentProvider, TranscriptionService


class FakeSleep:
    """Records requested waits instead of sleeping."""

    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)

    @property
    def total(self):
        return sum(self.calls)


class FakeTranscriber(TranscriptionService):
    def __init__(self, result=None, error=None, configured=True):
        self._result = result
        self._error = error
        self._configured = configured
        self.calls = []

    @property
    def is_configured(self):
        return self._configured

    async def transcribe(self, audio_data):
        self.calls.append(audio_data)
        if self._error is not None:
            raise self._error
        return self._result


class FakeProvider(EnrichmentProvider):
    def __init__(
        self,
        name,
        requires=(),
        result=None,
        error=None,
        configured=True,
        call_log=None,
        wait_for=None,
        release=None,
    ):
        self.name = name
        self.requires = tuple(requires)
        self._result = result
        self._error = error
        self._configured = configured
        self._call_log = call_log if call_log is not None else []
        self._wait_for = wait_for
        self._release = release
        self.contexts = []

    @property
    def is_configured(self):
        return self._configured

    async def enrich(self, context):
        self.contexts.append(context)
        self._call_log.append(self.name)
        if not self._configured:
            raise NotConfiguredError(self.name)
        if self._release is not None:
            self._release.set()
        if self._wait_for is not None:
            await asyncio.wait_for(self._wait_for.wait(), timeout=1)
        if self._error is not None:
            raise self._error
        return self._result

    def placeholder(self, context):
        return {"stub": self.name}
