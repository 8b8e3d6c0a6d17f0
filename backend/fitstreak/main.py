"""FastAPI application entry point for the fitness challenge tracker API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fitstreak.config import get_settings
from fitstreak.database import create_tables
from fitstreak.routers import logs, stats
from fitstreak.services.log_store import LogStoreError

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # The local tables are only needed by the SQL store
    if settings.LOG_STORE_BACKEND.lower() == "sql":
        create_tables()
    logger.info(f"Using {settings.LOG_STORE_BACKEND} log store")
    yield


app = FastAPI(
    title="Fitness Challenge API",
    description="Backend API for the 100-day fitness challenge - check-ins, streaks, badges and progress",
    version="1.0.0",
    lifespan=lifespan,
)

cors_origins = [
    settings.FRONTEND_URL,
    "http://localhost:5173",
    "http://localhost:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_origin_regex=r"https://.*\.vercel\.app",  # Allow all Vercel preview deployments
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LogStoreError)
async def log_store_error_handler(request: Request, exc: LogStoreError) -> JSONResponse:
    """Report store failures raised outside the routers (e.g. misconfiguration)."""
    logger.error(f"Log store error on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": exc.message},
    )


# Include routers
app.include_router(logs.router, prefix="/api/logs", tags=["Fitness Logs"])
app.include_router(stats.router, prefix="/api/stats", tags=["Stats"])


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - API information."""
    return {
        "name": "Fitness Challenge API",
        "version": "1.0.0",
        "status": "running",
    }


@app.get("/health", tags=["Health"])
@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
