"""
Main FastAPI application for Transactions Service

This module initializes the FastAPI application, configures CORS,
registers routers, and manages the database engine lifecycle.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine
import logging

from transactions_api.api.v1.endpoints import transactions
from transactions_api.core.config import settings, get_cors_origins
from transactions_api.db.base import Base
from transactions_api.db.session import engine, get_engine, ping

# Setup logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events
    """
    # Startup
    logger.info("=" * 50)
    logger.info(f"Starting {settings.project_name}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"API prefix: {settings.api_prefix or '/'}")
    logger.info(f"CORS origins: {get_cors_origins()}")
    logger.info("=" * 50)

    if settings.create_tables_on_startup:
        # Development only
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.project_name}...")
    await engine.dispose()


def create_application() -> FastAPI:
    """
    Application factory for creating FastAPI instance
    """

    app = FastAPI(
        title=settings.project_name,
        description="CRUD API over the Transactions table",
        version=VERSION,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
    )

    # Register routers
    register_routers(app)

    # Register base routes
    register_base_routes(app)

    return app


def register_routers(app: FastAPI) -> None:
    """Register API routers"""
    app.include_router(
        transactions.router,
        prefix=f"{settings.api_prefix}/transactions",
        tags=["Transactions"]
    )
    logger.info("✓ Transactions router registered")


def register_base_routes(app: FastAPI) -> None:
    """Register base application routes"""

    @app.get("/")
    async def root():
        """Root endpoint with API information"""
        return {
            "message": f"{settings.project_name} API",
            "version": VERSION,
            "status": "running",
            "docs_url": "/docs" if settings.debug else "disabled",
        }

    @app.get("/health")
    async def health_check(db_engine: AsyncEngine = Depends(get_engine)):
        """Health check endpoint"""
        database_ok = await ping(db_engine)
        return {
            "status": "healthy" if database_ok else "degraded",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": VERSION,
            "services": {
                "api": "operational",
                "database": "operational" if database_ok else "unavailable",
            }
        }

    @app.get("/config")
    async def get_config():
        """
        Get application configuration (development only)

        In production, this endpoint returns 404
        """
        if not settings.debug:
            raise HTTPException(
                status_code=404,
                detail="Endpoint is only available in development mode"
            )

        # Return only safe configuration (no secrets)
        return {
            "project_name": settings.project_name,
            "debug": settings.debug,
            "api_prefix": settings.api_prefix,
            "db_pool_size": settings.db_pool_size,
            "db_max_overflow": settings.db_max_overflow,
            "log_level": settings.log_level,
            "cors_origins": get_cors_origins(),
        }


# Create application instance
app = create_application()


if __name__ == "__main__":
    """
    Development server entry point

    For production use:
    gunicorn -w 4 -k uvicorn.workers.UvicornWorker transactions_api.main:app
    """
    import uvicorn

    uvicorn.run(
        "transactions_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
