"""FastAPI application for the Playbook editor."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from playbook import __version__
from playbook.api.routers import plays_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Playbook API starting up...")
    yield
    logger.info("Playbook API shutting down...")
    from playbook.api.services import get_session_manager

    await get_session_manager().cleanup_all()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Playbook API",
        description="American football play designer API",
        version=__version__,
        lifespan=lifespan,
    )

    # Configure CORS for browser frontends
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(plays_router, prefix="/api/v1")

    return app


# Create app instance
app = create_app()


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    from playbook.api.services import get_session_manager

    return {
        "status": "healthy",
        "version": __version__,
        "active_sessions": len(get_session_manager().active_sessions),
    }


def run_api(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the API server."""
    uvicorn.run(
        "playbook.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    run_api(reload=True)
