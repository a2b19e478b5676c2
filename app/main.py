"""FastAPI application entry point"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import settings
from app.core.db import init_db
from app.api.routes import desktop, uploads

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup"""
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized")
    yield


# Create FastAPI app
app = FastAPI(
    title="Cap Server",
    description="Video records and upload signing for the Cap desktop recorder",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS is computed per route from the origin allow-list (see app.core.cors);
# CORSMiddleware would overwrite Access-Control-Allow-Origin.

# Include routers
app.include_router(desktop.router)
app.include_router(uploads.router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Cap Server API",
        "version": "0.1.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}
