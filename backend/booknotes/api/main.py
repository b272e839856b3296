"""
Booknotes API Application Entry Point

Request path:
=============
┌─────────────────────────────────────────────────────────────────────────────┐
│  CORS                                                                       │
│   └─ request context (X-Request-ID bound into every log line)               │
│        └─ exception handlers  → {"error": {"code", "message", "details"}}   │
│             └─ routers: health, auth, users, genres, books, notifications   │
│                  └─ dependencies: DbSession → CurrentUser → services        │
└─────────────────────────────────────────────────────────────────────────────┘

Run (from backend/):
    uvicorn booknotes.api.main:app --host 0.0.0.0 --port 3686 --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from booknotes.config.settings import settings
from booknotes.shared.db import init_db, close_db
from booknotes.shared.core.logging import logger
from booknotes.api.middleware import setup_exception_handlers, setup_request_context
from booknotes.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Check the database on startup and release the pool on shutdown."""
    logger.info(
        "Booknotes API starting",
        environment=settings.APP_ENV,
        version=settings.APP_VERSION,
        port=settings.PORT,
    )
    await init_db()

    yield

    await close_db()
    logger.info("Booknotes API stopped")


def create_application() -> FastAPI:
    """Build the app: middleware, exception handlers, then routers."""
    app = FastAPI(
        title=settings.APP_NAME,
        description="Share book summaries, like them, and discuss them in threads",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    setup_request_context(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)
    register_routes(app)

    return app


app = create_application()
