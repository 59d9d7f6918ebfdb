"""FastAPI application entry point."""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from recipeshelf.config import get_settings
from recipeshelf.database import Base, get_async_engine, get_engine
from recipeshelf.logging_config import LoggingContext, configure_logging, get_logger
from recipeshelf.routers import (
    imports_router,
    ingredients_router,
    recipes_router,
    shopping_lists_router,
)

settings = get_settings()

# Configure logging on module load
configure_logging(settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Starting Recipeshelf API")

    # Create database tables if they don't exist
    async with get_async_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialized")

    yield

    logger.info("Shutting down Recipeshelf API")
    await get_async_engine().dispose()
    get_engine().dispose()


app = FastAPI(
    title="Recipeshelf API",
    description="Recipe ingredient parsing and shopping list aggregation",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Tag every log line of a request with its id and echo the id back."""
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    with LoggingContext(request_id=request_id):
        response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


# Include routers
app.include_router(ingredients_router)
app.include_router(recipes_router)
app.include_router(imports_router)
app.include_router(shopping_lists_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "recipeshelf-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Recipeshelf API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
