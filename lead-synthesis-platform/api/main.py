"""
Lead Synthesis Platform API - Main Application.

FastAPI application with CORS enabled for frontend communication.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from config.settings import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI application
app = FastAPI(
    title="Lead Synthesis Platform API",
    description="REST API for generating, storing and organizing B2B leads from an ideal customer profile",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS from CORS_ORIGINS (defaults to all origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins) or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["Health"])
def health_check():
    """
    Health check endpoint.

    Returns the API status, version, and which collaborators are configured.
    """
    current = get_settings()
    return {
        "status": "healthy",
        "version": __version__,
        "service": "lead-synthesis-platform-api",
        "store_configured": current.store_configured,
        "ai_configured": current.ai_configured,
    }


@app.get("/", tags=["Root"])
def root():
    """
    Root endpoint with API information.
    """
    return {
        "message": "Lead Synthesis Platform API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


# Import and include routers
from api.routers import dashboard, lead_groups, leads, search

app.include_router(leads.router, prefix="/api", tags=["Leads"])
app.include_router(search.router, prefix="/api", tags=["Search"])
app.include_router(lead_groups.router, prefix="/api", tags=["Lead Groups"])
app.include_router(dashboard.router, prefix="/api", tags=["Dashboard"])
