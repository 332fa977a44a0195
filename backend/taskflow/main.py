"""
FastAPI entrypoint for TaskFlow backend application.
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from taskflow.core.config import settings
from taskflow.core.exceptions import TaskFlowError
from taskflow.core.logging import setup_logging
from taskflow.core.utils import format_error
from taskflow.api.router import api_router
from taskflow.db.session import engine, init_db
from taskflow.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    init_db()
    logger.info(f"{settings.APP_NAME} started (environment: {settings.ENVIRONMENT})")
    yield
    engine.dispose()
    logger.info("Shutting down, database connections closed")


app = FastAPI(
    title="TaskFlow API",
    description="Backend API for personal task tracking",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, message: str) -> JSONResponse:
    response = JSONResponse(status_code=status_code, content=format_error(message))
    response.headers.update(SECURITY_HEADERS)
    return response


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    """Set the security headers on every response."""
    response = await call_next(request)
    response.headers.update(SECURITY_HEADERS)
    return response


@app.exception_handler(TaskFlowError)
async def taskflow_error_handler(request: Request, exc: TaskFlowError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"Invalid {field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # Details stay in the server log
    logger.error(f"Server error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/api/health", response_model=HealthResponse)
def health():
    """Health check endpoint."""
    return HealthResponse(
        timestamp=datetime.now(timezone.utc),
        environment=settings.ENVIRONMENT
    )


# Mount the prebuilt frontend last so API routes take precedence
static_dir = settings.STATIC_DIR
if os.path.exists(static_dir):
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")


def run():
    """Start the API server."""
    import uvicorn

    setup_logging()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
