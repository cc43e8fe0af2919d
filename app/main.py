import os
import sys
import logging
import logging.config
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from contextlib import asynccontextmanager

from app.db.base import Base
from app.db import models  # noqa: F401  registers tables on Base.metadata
from app.db.session import engine, async_session
from app.core.exceptions import register_exception_handlers
from app.api.routes import auth, boards, scraps, system

# Load logging config if present
if os.path.exists("logging.conf"):
    logging.config.fileConfig("logging.conf", disable_existing_loggers=False)
else:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )
logger = logging.getLogger("root")

# Detect environment (default to production)
ENV = os.getenv("APP_ENV", "production").lower()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "https://dadamda.me").split(",")
    if origin.strip()
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup logic
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized")

    yield  # App runs here

    await engine.dispose()
    logger.info("Shutting down...")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Dadamda API",
        version="1.0",
        lifespan=lifespan,
    )

    if ENV == "development":
        origins = [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]
        logger.info("CORS allowed for development environment")
    else:
        origins = CORS_ORIGINS
        logger.info("Running in production environment - CORS restricted")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # API routes
    app.include_router(auth.router)
    app.include_router(boards.router)
    app.include_router(scraps.router)
    app.include_router(system.router)

    app.add_api_route("/api/health", health, methods=["GET", "HEAD"])
    return app


async def health(request: Request):
    status = {
        "api": "ok",
        "database": None,
    }

    http_status = 200

    # --- Database check ---
    try:
        async with async_session() as db:
            await db.execute(text("SELECT 1"))
        status["database"] = "connected"
    except Exception as e:
        logger.warning(f"Health check could not reach the database: {e}")
        status["database"] = "unavailable"
        http_status = 503

    return JSONResponse(content=status, status_code=http_status)


app = create_app()
