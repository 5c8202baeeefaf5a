"""FastAPI Application Entry Point."""
import logging
from datetime import datetime, timezone
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from mailsmith import __version__
from mailsmith.config import get_settings
from mailsmith.routers import drafts
from mailsmith.core.errors import APIError, ErrorCode, ExternalServiceError, InternalError
from mailsmith.core.middleware import RequestContextMiddleware, get_request_id
from mailsmith.services.llm import LLMService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

settings = get_settings()


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info(f"Starting {settings.app_name}...")
    app.state.llm_service = LLMService.from_settings(settings)

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}...")
    await app.state.llm_service.aclose()


app = FastAPI(
    title=settings.app_name,
    description="AI-assisted email drafting",
    version=__version__,
    lifespan=lifespan,
)

# Add request context middleware (must be added before CORS)
app.add_middleware(RequestContextMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins if not settings.debug else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Response-Time"],
)


# =============================================================================
# Exception Handlers - Standardized Error Responses
# =============================================================================

@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """
    Handle custom API errors with standardized response format.

    Returns:
        {
            "error": "Human readable message",
            "code": "error_code",
            "param": "field_name" (optional),
            "details": [...] (optional),
            "request_id": "req_xxx",
            "timestamp": "2024-01-15T10:30:00Z"
        }
    """
    request_id = get_request_id(request)

    if isinstance(exc, ExternalServiceError):
        # Provider detail stays in the log, the caller gets exc.message only
        logger.error(
            f"[{request_id}] {exc.service} failure: {exc.code.value} - "
            f"{exc.log_message or exc.message}"
        )
    else:
        logger.warning(
            f"[{request_id}] API Error: {exc.code.value} - {exc.message}"
        )

    response_content = {
        **exc.to_dict(),
        "request_id": request_id,
        "timestamp": _timestamp(),
    }

    return JSONResponse(
        status_code=exc.status_code,
        content=response_content,
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies and parameters.

    Every client-side input problem on this API is a 400, so FastAPI's
    default 422 is remapped here.
    """
    request_id = get_request_id(request)

    errors = exc.errors()
    details = []
    param = None

    for error in errors:
        loc = " -> ".join(str(l) for l in error.get("loc", []))
        msg = error.get("msg", "Invalid value")
        details.append(f"{loc}: {msg}")
        if param is None and error.get("loc"):
            param = str(error["loc"][-1])

    logger.warning(
        f"[{request_id}] Validation Error: {details}"
    )

    response_content = {
        "error": "Request validation failed",
        "code": ErrorCode.VALIDATION_FAILED.value,
        "param": param,
        "details": details,
        "request_id": request_id,
        "timestamp": _timestamp(),
    }

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=response_content,
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler for unexpected errors.

    Exception text is logged, never returned.
    """
    request_id = get_request_id(request)

    logger.exception(
        f"[{request_id}] Unhandled Exception: {type(exc).__name__}: {str(exc)}"
    )

    error = InternalError(log_message=str(exc))
    response_content = {
        **error.to_dict(),
        "request_id": request_id,
        "timestamp": _timestamp(),
    }

    if settings.debug:
        response_content["details"] = [type(exc).__name__]

    return JSONResponse(
        status_code=error.status_code,
        content=response_content,
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    drafts.router,
    prefix="/api/generateEmail",
    tags=["Email Drafts"]
)


# =============================================================================
# Health & Status Endpoints
# =============================================================================

@app.get("/")
async def root(request: Request):
    """API root endpoint."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "status": "running",
        "docs": "/docs",
        "request_id": get_request_id(request),
    }


@app.get("/health")
async def health_check(request: Request):
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "provider_configured": settings.provider_configured,
        "model": settings.llm_model,
        "timestamp": _timestamp(),
        "request_id": get_request_id(request),
    }
