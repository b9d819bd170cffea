"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables from .env file
# Must be called before importing modules that read env vars at import time
load_dotenv()

# main.py is at <root>/src/api/main.py, src is two levels up
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.errors import register_exception_handlers
from api.routes import auth, health, profile
from adapter.postgres.connection import create_pool, ensure_schema, close_pool
from utils.logging import setup_structured_logging

# Set up structured JSON logging
setup_structured_logging()

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Blog Accounts API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: create the connection pool, close it on shutdown."""
    pool = await create_pool()
    if pool:
        if await ensure_schema(pool):
            logger.info("Database schema verified/created successfully")
        else:
            logger.warning("Failed to apply database schema")
    else:
        logger.warning("PostgreSQL unavailable, requests needing the database will return 503")
    app.state.db_pool = pool

    yield  # App runs here

    await close_pool(app.state.db_pool)
    app.state.db_pool = None


# Create FastAPI app
app = FastAPI(
    title=SERVICE_NAME,
    description="Account service for the blog - handles registration and user profiles",
    version=VERSION,
    lifespan=lifespan,
)
app.state.db_pool = None

register_exception_handlers(app)

# CORS configuration for cross-origin requests from the web frontend
# - If CORS_ORIGINS="*": allow_credentials must be False (browsers don't support credentials with wildcard)
# - If CORS_ORIGINS is a specific list: allow_credentials can be True
cors_origins_env = os.getenv("CORS_ORIGINS", "*")

if cors_origins_env == "*":
    cors_origins = ["*"]
    allow_credentials = False
    logger.warning(
        "CORS configured with wildcard origin ('*'). "
        "For production, set CORS_ORIGINS to specific domains (e.g., 'https://blog.example.com')"
    )
else:
    # Strip whitespace from each origin to handle "origin1, origin2" format
    cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
    allow_credentials = True
    logger.info(f"CORS configured with specific origins: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    # Application logs go through structured logging; uvicorn's access log would duplicate them
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False
    )
