"""
FastAPI application entry point for YouthConnect.

This is the main app that:
- Initializes FastAPI with CORS
- Registers all API routers
- Maps data service outages to 503
- Provides health check endpoint
- Sets up database connection lifecycle
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from youthconnect.config import settings
import youthconnect.database as database
from youthconnect.database import BackendUnavailableError
from youthconnect.api import alerts, applications, auth, chat, guidance, home, job_map, jobs

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    On startup: Database connection is already handled by engine
    On shutdown: Close database connections gracefully
    """
    logger.info("Starting YouthConnect API...")
    logger.info(f"Database: {settings.database_url.split('@')[1] if '@' in settings.database_url else 'configured'}")
    logger.info(f"Resume storage: {settings.storage_backend}")
    logger.info(f"Debug mode: {settings.debug}")

    yield

    logger.info("Shutting down YouthConnect API...")
    await database.engine.dispose()


app = FastAPI(
    title="YouthConnect API",
    description="Job board: search, apply, career guidance and assistant",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan,
)

# Set ALLOWED_ORIGINS environment variable with comma-separated domains
allowed_origins = [
    "http://localhost:5173",  # Local development
    settings.get_frontend_url(),
]
if settings.allowed_origins:
    allowed_origins.extend(origin.strip() for origin in settings.allowed_origins.split(','))

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(dict.fromkeys(allowed_origins)),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BackendUnavailableError)
async def backend_unavailable_handler(request: Request, exc: BackendUnavailableError):
    """Data service failures are reported once, without internals."""
    logger.error(f"Backend unavailable during {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=503,
        content={"detail": "Failed to load data. Please try again."}
    )


@app.get("/health")
async def health_check():
    """Simple health check endpoint."""
    return {
        "status": "healthy",
        "service": "YouthConnect API",
        "version": "1.0.0",
    }


@app.get("/")
async def root():
    """API root with basic info."""
    return {
        "message": "YouthConnect API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }


# Register API routers
app.include_router(home.router, prefix="/api", tags=["home"])
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(jobs.router, prefix="/api/jobs", tags=["jobs"])
app.include_router(applications.router, prefix="/api", tags=["applications"])
app.include_router(guidance.router, prefix="/api/career-guidance", tags=["career-guidance"])
app.include_router(job_map.router, prefix="/api/job-map", tags=["job-map"])
app.include_router(chat.router, prefix="/api/chat", tags=["chat"])
app.include_router(alerts.router, prefix="/api/alerts", tags=["alerts"])
