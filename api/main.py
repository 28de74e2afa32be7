"""
Veracity API — Main Application

POST /analyze           — Full credibility analysis of a statement
POST /analyze/batch     — Analyse several statements in one request
POST /analyze/realtime  — Short-form status for a growing transcript
GET  /lexicon           — Default word lists used by the engine
GET  /health            — Health check

The API holds no state between requests and makes no outbound calls.
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from veracity import __version__
from veracity.analyzer import ENGINE_VERSION, analyze_statement, build_report
from veracity.config import settings
from veracity.lexicon import DEFAULT_LEXICON
from veracity.logging import setup_logging, get_logger
from veracity.realtime import analyze_realtime
from veracity.schemas.analysis import (
    AnalyzeRequest,
    AnalyzeBatchRequest,
    AnalyzeResponse,
    AnalyzeBatchResponse,
    RealTimeResponse,
    LexiconResponse,
    HealthResponse,
)

logger = get_logger("api")


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Veracity API starting", extra={"engine_version": ENGINE_VERSION})
    yield
    logger.info("Veracity API shutting down")


app = FastAPI(
    title="Veracity API",
    description="Deterministic credibility analysis for witness statements",
    version=f"{__version__} (engine {ENGINE_VERSION})",
    lifespan=lifespan,
)

# CORS — set VERACITY_CORS_ORIGINS in production (comma-separated)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=False,
)


# ============================================================
# ERROR HANDLERS
# ============================================================

@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions — return structured error, don't leak internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"error": str(exc), "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error. The analysis could not be completed."},
    )


def _run_analysis(text: str, duration_seconds: float) -> dict:
    """Run the pipeline, mapping caller contract violations to 400."""
    try:
        analysis = analyze_statement(text, duration_seconds)
    except (TypeError, ValueError) as e:
        raise HTTPException(400, str(e))
    return build_report(analysis)


# ============================================================
# ROUTES
# ============================================================

@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze(request: AnalyzeRequest):
    """Analyse a statement for credibility signals."""
    start = time.time()
    report = _run_analysis(request.text, request.duration_seconds)

    duration = int((time.time() - start) * 1000)
    credibility = report["credibility"]
    logger.info(
        f"Analysis complete: score={credibility['overall_score']}",
        extra={
            "overall_score": credibility["overall_score"],
            "confidence_level": credibility["confidence_level"],
            "word_count": report["linguistic"]["word_count"],
            "duration_ms": duration,
        },
    )
    return report


@app.post("/analyze/batch", response_model=AnalyzeBatchResponse)
async def analyze_batch(request: AnalyzeBatchRequest):
    """Analyse several statements. Each item is independent."""
    results = [
        _run_analysis(item.text, item.duration_seconds)
        for item in request.items
    ]
    logger.info(
        f"Batch complete: {len(results)} analysed",
        extra={"items": len(results)},
    )
    return {"results": results, "total": len(results)}


@app.post("/analyze/realtime", response_model=RealTimeResponse)
async def analyze_live(request: AnalyzeRequest):
    """Status for an in-progress transcript. Safe to poll as text grows."""
    try:
        status = analyze_realtime(request.text, request.duration_seconds)
    except (TypeError, ValueError) as e:
        raise HTTPException(400, str(e))
    return asdict(status)


@app.get("/lexicon", response_model=LexiconResponse)
async def get_lexicon():
    """Return the default word lists the engine matches against."""
    return DEFAULT_LEXICON.as_dict()


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return {
        "status": "operational",
        "version": __version__,
        "engine_version": ENGINE_VERSION,
    }


# --- Security + Version Headers Middleware ---
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    """Add security and version headers to all responses."""
    response = await call_next(request)
    response.headers["X-Veracity-Version"] = __version__
    response.headers["X-Engine-Version"] = ENGINE_VERSION
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


# --- Body Size Limit Middleware ---
_MAX_BODY_BYTES = 1_048_576  # 1 MB


@app.middleware("http")
async def enforce_body_size_limit(request: Request, call_next):
    """Reject requests exceeding 1MB — guards both Content-Length and chunked bodies."""
    content_length = request.headers.get("content-length")
    if content_length:
        try:
            if int(content_length) > _MAX_BODY_BYTES:
                return JSONResponse(
                    status_code=413,
                    content={"detail": "Request body too large."},
                )
        except ValueError:
            pass  # Malformed content-length; let the framework handle it

    if request.method in ("POST", "PUT", "PATCH"):
        body = await request.body()
        if len(body) > _MAX_BODY_BYTES:
            return JSONResponse(
                status_code=413,
                content={"detail": "Request body too large."},
            )

    return await call_next(request)


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with method, path, status, duration."""
    path = request.url.path
    if path == "/health":
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)

    logger.info(
        f"{request.method} {path} → {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response
