"""FastAPI server for passage context tools."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api.deps import get_context_engine, sanitize_error_message
from .config import settings
from .context_engine import ContextEngine
from .engine.handlers import load_reference_text
from .mcp.transport import router as mcp_router
from .middleware import SecurityHeadersMiddleware
from .models import HealthResponse, MCPRequest, MCPResponse, ReadyResponse, UsageInfo
from .services.text_loader import DocumentLoadError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ============ SENTRY INITIALIZATION ============

if settings.sentry_dsn:
    try:
        import sentry_sdk

        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1 if settings.environment == "production" else 1.0,
        )
        logger.info("Sentry error tracking initialized")
    except ImportError:
        logger.warning("Sentry DSN configured but sentry-sdk not installed")
else:
    logger.debug("Sentry DSN not configured - error tracking disabled")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info(f"Starting passage context server v{__version__}")

    if not settings.debug and settings.cors_allowed_origins == "*":
        logger.warning(
            "SECURITY WARNING: CORS is configured to allow all origins ('*'). "
            "Set CORS_ALLOWED_ORIGINS to specific domains in production."
        )

    if settings.preload_reference_text:
        try:
            await load_reference_text(get_context_engine().context)
        except DocumentLoadError as e:
            logger.warning(f"Reference text preload failed (will retry on first use): {e}")

    yield


app = FastAPI(
    title="Passage Context Server",
    description="Keyword-driven passage extraction for grounding LLM tool calls",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(mcp_router)


# ============ EXCEPTION HANDLERS ============


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent response format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "usage": {"latency_ms": 0},
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with sanitized error messages."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "An internal server error occurred. Please try again.",
            "usage": {"latency_ms": 0},
        },
    )


# ============ HEALTH ENDPOINTS ============


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Health check endpoint (lightweight liveness check)."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(UTC),
    )


@app.get("/ready", tags=["Health"])
async def readiness_check(engine: ContextEngine = Depends(get_context_engine)):
    """Readiness check - verifies the reference text can be loaded."""
    checks: dict[str, bool] = {}

    try:
        await load_reference_text(engine.context)
        checks["reference_text"] = True
    except DocumentLoadError as e:
        logger.warning(f"Readiness check failed: {e}")
        checks["reference_text"] = False

    all_ok = all(checks.values())
    response = ReadyResponse(
        status="ready" if all_ok else "not_ready",
        version=__version__,
        checks=checks,
    )
    return JSONResponse(
        content=response.model_dump(mode="json"),
        status_code=200 if all_ok else 503,
    )


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Passage Context Server",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "mcp": "/mcp",
    }


# ============ TOOL ENDPOINT ============


@app.post("/v1/tools", response_model=MCPResponse, tags=["Tools"])
async def tool_endpoint(
    request: MCPRequest,
    engine: ContextEngine = Depends(get_context_engine),
) -> MCPResponse:
    """
    Execute a passage tool.

    Args:
        request: Tool name and parameters

    Returns:
        MCPResponse with result or sanitized error
    """
    start_time = time.perf_counter()

    try:
        result = await engine.execute(request.tool, request.params)
    except Exception as e:
        latency_ms = int((time.perf_counter() - start_time) * 1000)
        return MCPResponse(
            success=False,
            error=sanitize_error_message(e),
            usage=UsageInfo(latency_ms=latency_ms),
        )

    latency_ms = int((time.perf_counter() - start_time) * 1000)
    return MCPResponse(
        success=True,
        result=result.data,
        usage=UsageInfo(
            input_tokens=result.input_tokens,
            output_tokens=result.output_tokens,
            latency_ms=latency_ms,
        ),
    )
