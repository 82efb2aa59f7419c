"""Main FastAPI application with modularized routes."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import CORS_ORIGINS, LOG_LEVEL
from api.database import init_db
from api.routes import analysis, answer_keys, progress, scoring, tests
from api.services.cleanup_service import schedule_progress_cleanup
from core.logging_setup import setup_console_logging

setup_console_logging(LOG_LEVEL)

app = FastAPI(title="Mock Exam API")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Startup events
@app.on_event("startup")
def startup_events() -> None:
    """Initialize database and schedule cleanup tasks on startup."""
    init_db()
    schedule_progress_cleanup()


@app.get("/api/health")
def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


# Include routers
app.include_router(answer_keys.router)
app.include_router(scoring.router)
app.include_router(tests.router)
app.include_router(progress.router)
app.include_router(analysis.router)
