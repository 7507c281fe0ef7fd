import pytest
from fastapi.testclient import TestClient

from emoreco.config import AppConfig, ServerConfig
from emoreco.dependencies import get_config, get_orchestrator
from emoreco.domain import TranscriptionResult
from emoreco.exceptions import PollTimeoutError
from emoreco.handlers import AnalysisOrchestrator
from emoreco.main import app
from fakes import FakeProvider, FakeTranscriber

TRANSCRIPTION = TranscriptionResult(
    text="hello world", confidence=0.9, audio_duration=6.0, sentiment=None
)


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def _use(orchestrator, config=None):
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    if config is not None:
        app.dependency_overrides[get_config] = lambda: config


def test_analyze_audio_returns_aggregated_response(client):
    transcriber = FakeTranscriber(TRANSCRIPTION)
    _use(
        AnalysisOrchestrator(
            transcriber,
            [
                FakeProvider("emotions", result=[{"label": "hap", "score": 0.8}]),
                FakeProvider("detailedAnalysis", requires=("emotions",), configured=False),
            ],
        )
    )

    response = client.post(
        "/api/analyze-audio", files={"audio": ("clip.wav", b"RIFFdata", "audio/wav")}
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "transcript": "hello world",
        "audioMetrics": {
            "wordsPerMinute": 20,
            "confidence": 0.9,
            "audioDuration": 6.0,
            "sentiment": None,
        },
        "emotions": [{"label": "hap", "score": 0.8}],
        "detailedAnalysis": {"error": "detailedAnalysis not configured"},
    }
    assert transcriber.calls == [b"RIFFdata"]


def test_analyze_audio_without_file(client):
    transcriber = FakeTranscriber(TRANSCRIPTION)
    _use(AnalysisOrchestrator(transcriber))

    response = client.post("/api/analyze-audio")

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "No audio file provided"}
    assert transcriber.calls == []


def test_analyze_audio_with_empty_file(client):
    _use(AnalysisOrchestrator(FakeTranscriber(TRANSCRIPTION)))

    response = client.post(
        "/api/analyze-audio", files={"audio": ("clip.wav", b"", "audio/wav")}
    )

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_analyze_audio_rejects_oversized_upload(client):
    transcriber = FakeTranscriber(TRANSCRIPTION)
    _use(
        AnalysisOrchestrator(transcriber),
        AppConfig(server=ServerConfig(max_upload_bytes=8)),
    )

    response = client.post(
        "/api/analyze-audio", files={"audio": ("clip.wav", b"123456789", "audio/wav")}
    )

    assert response.status_code == 413
    assert response.json()["success"] is False
    assert transcriber.calls == []


def test_analyze_audio_surfaces_dependency_failure(client):
    _use(AnalysisOrchestrator(FakeTranscriber(error=PollTimeoutError("job", 30))))

    response = client.post(
        "/api/analyze-audio", files={"audio": ("clip.wav", b"data", "audio/wav")}
    )

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Processing timeout - audio too long or server busy",
    }


def test_health_reports_configured_services(client):
    _use(
        AnalysisOrchestrator(
            FakeTranscriber(configured=True),
            [FakeProvider("emotions", configured=False), FakeProvider("detailedAnalysis")],
        )
    )

    response = client.get("/api/health")

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is True
    assert body["message"] == "EMORECO Backend is running"
    assert body["services"] == {
        "transcription": True,
        "emotion": False,
        "generativeAnalysis": True,
    }
    assert body["timestamp"].endswith("+00:00")


def test_index_lists_endpoints(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["endpoints"] == {
        "health": "/api/health",
        "analyze": "/api/analyze-audio (POST)",
    }


def test_unknown_route_returns_json_404(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Endpoint not found"}
