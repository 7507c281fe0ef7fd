"""Audio analysis and service status endpoints."""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from emoreco.config import AppConfig
from emoreco.dependencies import get_config, get_orchestrator
from emoreco.domain import AnalysisResponse, ErrorResponse
from emoreco.handlers import AnalysisOrchestrator
from emoreco.logging import setup_logging

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["analysis"])
index_router = APIRouter(tags=["meta"])

OrchestratorDep = Annotated[AnalysisOrchestrator, Depends(get_orchestrator)]
ConfigDep = Annotated[AppConfig, Depends(get_config)]


def _respond(result: AnalysisResponse | ErrorResponse) -> JSONResponse:
    status_code = result.status_code if isinstance(result, ErrorResponse) else 200
    return JSONResponse(
        content=result.model_dump(mode="json", by_alias=True),
        status_code=status_code,
    )


@router.post(
    "/analyze-audio",
    response_model=AnalysisResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def analyze_audio(
    orchestrator: OrchestratorDep,
    config: ConfigDep,
    audio: UploadFile | None = File(None),
) -> JSONResponse:
    """
    Transcribes and analyzes an uploaded audio clip.

    Expects the clip in the multipart field `audio`.
    """
    if audio is None:
        logger.warning("Analysis request without audio file")
        return _respond(ErrorResponse(error="No audio file provided", status_code=400))

    max_bytes = config.server.max_upload_bytes
    audio_data = await audio.read(max_bytes + 1)
    if len(audio_data) > max_bytes:
        logger.warning(
            "Audio file too large",
            extra={"file_name": audio.filename, "max_bytes": max_bytes},
        )
        return _respond(
            ErrorResponse(
                error=f"Audio file exceeds the {max_bytes} byte limit", status_code=413
            )
        )

    logger.info(
        "Audio analysis request received",
        extra={
            "file_name": audio.filename,
            "content_type": audio.content_type,
            "size": len(audio_data),
        },
    )
    return _respond(await orchestrator.analyze_audio(audio_data))


@router.get("/health")
def health(orchestrator: OrchestratorDep) -> dict:
    """Reports liveness and which external services are configured."""
    return {
        "success": True,
        "message": "EMORECO Backend is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": orchestrator.service_availability().model_dump(by_alias=True),
    }


@index_router.get("/")
def index() -> dict:
    return {
        "success": True,
        "message": "EMORECO Backend API",
        "endpoints": {
            "health": "/api/health",
            "analyze": "/api/analyze-audio (POST)",
        },
    }
