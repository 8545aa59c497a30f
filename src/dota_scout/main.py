"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dota_scout import __version__
from dota_scout.api.routes.matches import router as matches_router
from dota_scout.config import settings
from dota_scout.services.match_service import MatchService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: build the service unless a test already injected one
    if not hasattr(app.state, "match_service"):
        app.state.match_service = MatchService.from_settings(settings)
    yield


app = FastAPI(
    title="Dota Scout",
    description="Match normalization and role inference for team dashboards",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "dota-scout"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Dota Scout API",
        "version": __version__,
        "docs": "/docs",
    }


# Register routers
app.include_router(matches_router)
