"""FastAPI application factory.

Creates and configures the FastAPI application with routers, middleware
and exception handlers. Endpoints are versioned under /api/v1/; the
health check stays unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cashflow import __version__
from cashflow.application.factories import RepositoryFactory
from cashflow.presentation.api.dependencies import build_repository_factory
from cashflow.presentation.api.exception_handlers import setup_exception_handlers
from cashflow.presentation.api.routers import cash_flow_router
from cashflow_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for cashflow modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("cashflow").setLevel(log_level)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Cash Flow",
        "description": """Hierarchical cash-flow (Sankey) graph.

**Levels:**
- `major`: income sources → budget → expense majors
- `category`: income majors → income categories → budget → expense majors → expense categories

**Expand/collapse:**
- Pass `expanded` node ids to receive only the visible graph
- Flow through hidden nodes is summed onto the nearest visible node
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting %s API v%s...", app.state.settings.app_name, API_VERSION)
    yield
    logger.info("Shutting down %s API...", app.state.settings.app_name)


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(
        cash_flow_router,
        prefix="/transactions",
        tags=["Cash Flow"],
    )
    return v1_router


def create_app(
    settings: Settings | None = None,
    repository_factory: RepositoryFactory | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.
    repository_factory
        Optional transaction source; defaults to an in-memory store seeded
        from ``settings.transactions_file``.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Hierarchical **cash-flow graph** with expand/collapse re-routing.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    if repository_factory is None:
        repository_factory = build_repository_factory(settings)

    app.state.settings = settings
    app.state.repository_factory = repository_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    return app


def run() -> None:
    """Serve the API with uvicorn using host/port from settings."""
    settings = get_settings()
    uvicorn.run(
        "cashflow.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
    )
