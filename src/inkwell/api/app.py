"""
Main FastAPI application for Inkwell
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..host import Host, bootstrap, create_host
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Inkwell API...")
    try:
        await bootstrap()
    except Exception as e:
        logger.error("Bootstrap failed", error=str(e))
        raise
    logger.info("Bootstrap complete")

    yield

    logger.info("Shutting down Inkwell API...")


def create_app(host: Host | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    from ..graphql.schema import create_graphql_router, validate_schema

    app = FastAPI(
        title="Inkwell API",
        description="Custom GraphQL queries for articles and author contacts",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        host = host or create_host()
        logger.info("Validating GraphQL schema...")
        validate_schema(host.schema)
        app.include_router(create_graphql_router(host), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    app.state.host = host
    return app
