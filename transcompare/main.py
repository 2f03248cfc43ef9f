"""FastAPI main application."""

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from transcompare import __version__
from transcompare.api.routes import router
from transcompare.config import settings
from transcompare.exceptions import TranslationRootError
from transcompare.services.loader import load_session
from transcompare.services.session_store import session_store

# Configure logging for the app (must be after imports but before app usage)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stdout,
)
logging.getLogger("transcompare").setLevel(logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifespan context manager for startup and shutdown events.

    Loads ``settings.default_root`` into a first session when configured.
    """
    app.state.session_store = session_store

    if settings.default_root:
        try:
            session = load_session(
                settings.default_root, primary_language=settings.primary_language
            )
        except TranslationRootError as e:
            logger.warning("Default root not loaded: %s", e)
        else:
            session_store.add(session)

    yield

    session_store.clear()


# Create FastAPI app
app = FastAPI(
    title="Transcompare API",
    description="Compare localization resource trees across languages",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url, "http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root() -> dict[str, str]:
    """API info."""
    return {
        "message": "Transcompare API",
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


def main() -> None:
    """Run the application."""
    uvicorn.run(
        "transcompare.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level="info",
    )


if __name__ == "__main__":
    main()
