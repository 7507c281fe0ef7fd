"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import ddtrace.auto  # noqa: F401
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from emoreco.dependencies import close_http_client, get_config
from emoreco.logging import setup_logging
from emoreco.routes import analysis_router, index_router

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting EMORECO backend")
    yield
    await close_http_client()
    logger.info("EMORECO backend stopped")


app = FastAPI(title="EMORECO Voice Analysis", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_config().server.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(index_router)
app.include_router(analysis_router)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    error = "Endpoint not found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(
        {"success": False, "error": error}, status_code=exc.status_code
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid request", extra={"path": request.url.path})
    return JSONResponse({"success": False, "error": "Invalid request"}, status_code=400)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return JSONResponse(
        {"success": False, "error": "Internal server error"}, status_code=500
    )


def main():
    """Runs the API server."""
    server = get_config().server
    uvicorn.run(app, host=server.host, port=server.port, log_config=None)


if __name__ == "__main__":
    main()
