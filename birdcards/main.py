"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from birdcards.config import configure_logging, get_settings
from birdcards.core import container
from birdcards.database import dispose_engine, initialize_database
from birdcards.domain.common.exceptions import DomainError, EntityNotFoundError
from birdcards.exceptions import BirdcardsError
from birdcards.infrastructure.decks.routers import decks, flashcards
from birdcards.infrastructure.media.routers import uploads

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Set up logging and the database, drain pending image cleanups on shutdown."""
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION} ({settings.ENVIRONMENT})")

    yield

    container.image_cleanup_worker().shutdown()
    dispose_engine()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Bird identification flashcards with secure image uploads.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BirdcardsError)
async def birdcards_error_handler(request: Request, exc: BirdcardsError) -> JSONResponse:
    """Translate application errors into their HTTP status."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Domain rule violations are client errors."""
    if isinstance(exc, EntityNotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


@app.get("/")
def root() -> dict[str, str]:
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}


@app.get("/health")
def health_check() -> dict[str, str]:
    return {"status": "healthy"}


app.include_router(decks.router)
app.include_router(flashcards.router)
app.include_router(uploads.router)
