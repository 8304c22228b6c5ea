import json
import logging
import time
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from urbansprout import __version__
from urbansprout.config import settings
from urbansprout.routers import (
    admin_suggestions_router, chatbot_router, plant_suggestions_router, plants_router,
)
from urbansprout.routers.chatbot import limiter
from urbansprout.services.catalog import load_catalog
from urbansprout.services.errors import NotFoundError, ValidationError
from urbansprout.services.scheduler import start_scheduler, stop_scheduler
from urbansprout.services.session_store import SessionStore
from urbansprout.services.text_generation import MistralClient

logger = logging.getLogger("urbansprout")
logging.basicConfig(level=settings.log_level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan for startup/shutdown events."""
    # Startup
    app.state.catalog = load_catalog(settings.plant_catalog_path)
    app.state.sessions = SessionStore(
        max_turns=settings.session_max_turns,
        ttl_seconds=settings.session_ttl_seconds,
    )
    app.state.text_generator = MistralClient(settings)
    start_scheduler(app.state.sessions, settings.session_sweep_interval_seconds)
    yield
    # Shutdown
    stop_scheduler()
    app.state.text_generator.close()


app = FastAPI(
    title="UrbanSprout API",
    description="Plant recommendations for urban growers: quiz suggestions, keyword filters and a gardening chatbot",
    version=__version__,
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    """Set basic security headers for all API responses."""
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    response.headers["Permissions-Policy"] = "camera=(), microphone=(), geolocation=()"
    return response


@app.middleware("http")
async def structured_logging_middleware(request: Request, call_next):
    start = time.perf_counter()
    req_id = request.headers.get("X-Request-ID", str(uuid4()))
    request.state.request_id = req_id

    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers["X-Request-ID"] = req_id
        return response
    finally:
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        payload = {
            "request_id": req_id,
            "path": request.url.path,
            "method": request.method,
            "status": status_code,
            "duration_ms": duration_ms,
        }
        logger.info(json.dumps(payload))


# Include routers
app.include_router(plant_suggestions_router)
app.include_router(plants_router)
app.include_router(admin_suggestions_router)
app.include_router(chatbot_router)

Instrumentator().instrument(app).expose(app, include_in_schema=False)


@app.get("/health")
def health_check():
    """Health check endpoint for Docker."""
    return {"status": "healthy"}


@app.get("/")
def root():
    """Root endpoint with API information."""
    return {
        "name": "UrbanSprout API",
        "version": __version__,
        "docs": "/docs",
        "suggestions": {
            "resolve": "/plant-suggestions/resolve",
            "keyword": "/plants/suggest",
            "quiz": "/plants/quiz",
        },
        "chatbot": "/chatbot",
    }
