"""
Postpartum Recovery API

Tracks postpartum recovery (measurements, exercise, supplements, mood and
hydration) and recommends exercises for the current postpartum week.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recovery.core.config import settings
from recovery.core.logging_config import setup_logging
from recovery.routers import (
    health_router,
    profile_router,
    measurements_router,
    exercises_router,
    supplements_router,
    mood_router,
    hydration_router,
    progress_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan events."""
    # Startup
    setup_logging()
    print(f"🌱 Starting {settings.app_name} v{settings.app_version}")
    print(f"📍 API prefix: {settings.api_v1_prefix}")
    print(f"🔧 Debug mode: {settings.debug}")

    yield

    # Shutdown
    print("👋 Shutting down Postpartum Recovery API")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Postpartum recovery tracking with week-by-week exercise recommendations",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Root endpoint
@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "docs": "/docs",
    }


# Include routers
app.include_router(health_router)
app.include_router(profile_router, prefix=settings.api_v1_prefix)
app.include_router(measurements_router, prefix=settings.api_v1_prefix)
app.include_router(exercises_router, prefix=settings.api_v1_prefix)
app.include_router(supplements_router, prefix=settings.api_v1_prefix)
app.include_router(mood_router, prefix=settings.api_v1_prefix)
app.include_router(hydration_router, prefix=settings.api_v1_prefix)
app.include_router(progress_router, prefix=settings.api_v1_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "recovery.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
