"""
FastAPI application entry point.
Assembles the app with routers, middleware, lifespan handlers, and exception handlers.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kappaplan.api.v1.router import api_router
from kappaplan.api.v1.endpoints.health import get_health
from kappaplan.core.config import settings
from kappaplan.core.exceptions import setup_exception_handlers
from kappaplan.core.logging import setup_logging
from kappaplan.db.session import init_db, close_db
from kappaplan.deps.di_container import get_container


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    Opens the SQLite database and the DI container.
    """
    setup_logging()
    await init_db()
    app.state.container = get_container()

    yield

    await close_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Production planning and workforce scheduling API",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/health", response_model=None, include_in_schema=False)
    async def root_health():
        """Root-level health check endpoint."""
        return await get_health()

    setup_exception_handlers(app)

    return app


app = create_app()
