"""
Main FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logfire

from config import settings
from observability.logfire_config import LogfireConfig
from api.routes import email_router
from pipeline.core.exceptions import ValidationError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Initialize Logfire first so we can use structured logging
    LogfireConfig.initialize(token=settings.logfire_token, environment=settings.environment)

    logfire.info(
        "Starting Quill API Server",
        environment=settings.environment,
        debug=settings.debug,
        model=settings.generation_model,
    )

    if not settings.openrouter_api_key:
        logfire.error(
            "OpenRouter API key not configured; generation requests will fail",
            hint="Set OPENROUTER_API_KEY in .env file",
        )

    logfire.info("Quill API Server startup complete")

    yield

    logfire.info("Shutting down Quill API Server")


app = FastAPI(
    title="Quill API",
    description="Backend API for Quill - AI email generator",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report unparseable request bodies as {"error": "..."} like every other failure.

    Only the error types are logged; the rejected input is never echoed back.
    """
    logfire.info(
        "Request body rejected",
        path=request.url.path,
        error_types=[error.get("type") for error in exc.errors()]
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": ValidationError.message},
    )


# ============================================================================
# Health Check Endpoints
# ============================================================================

@app.get("/health", tags=["Health"])
async def health_check() -> Dict[str, str]:
    """
    Health check endpoint for load balancers and monitoring.

    Reports "degraded" when no generation credential is configured.
    """
    configured = bool(settings.openrouter_api_key)

    return {
        "status": "healthy" if configured else "degraded",
        "service": "quill-api",
        "version": "1.0.0",
        "generation": "configured" if configured else "missing_api_key",
        "environment": settings.environment,
    }


@app.get("/", tags=["Root"])
async def root() -> Dict[str, str]:
    """
    Root endpoint - API information.
    """
    return {
        "name": "Quill API",
        "version": "1.0.0",
        "description": "Backend API for AI email generation",
        "docs": "/docs",
        "health": "/health",
    }


# ============================================================================
# API Routers
# ============================================================================

# Email generation endpoints (synchronous, no authentication)
app.include_router(email_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
