"""Signup Form — server-rendered signup form with deterministic validation.

Main FastAPI application with lifespan logging, CORS, and global error handling.
"""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from signup.config import get_settings
from signup.api.router import api_router, page_router
from signup.exceptions import SignupValidationFailed
from signup.models.responses import SignupRejectedResponse

settings = get_settings()

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    logger.info("app_starting", debug=settings.DEBUG)
    logger.info("app_started")

    yield

    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title=settings.APP_NAME,
    description="Signup form with deterministic, side-effect-free validation.",
    version=settings.VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Middleware ──

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


@app.exception_handler(SignupValidationFailed)
async def signup_validation_handler(request: Request, exc: SignupValidationFailed):
    """Rejected signup — ordered messages plus the submitted values."""
    body = SignupRejectedResponse(errors=exc.failure.errors, echo=exc.failure.echo)
    return JSONResponse(status_code=422, content=body.model_dump(mode="json", by_alias=True))


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")
app.include_router(page_router)  # /signup HTML form (no versioned prefix)


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": settings.APP_NAME,
        "version": settings.VERSION,
        "form": "/signup",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
