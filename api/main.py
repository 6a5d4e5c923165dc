"""
Zulu Timestamp Service API - Main Application.

FastAPI application exposing the application version and timestamp
normalization. Every request path is logged by the leading and trailing
request filters.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from api import __version__
from services.version_service import get_app_version

logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Zulu Timestamp Service API",
    description="REST API for normalizing ISO-8601 timestamps to Zulu (UTC)",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS - Allow all origins for development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# The last registered middleware runs first, so the trailing filter goes first.
@app.middleware("http")
async def trailing_filter(request: Request, call_next):
    logger.info(f"TrailingFilter - {request.url.path}", extra={"filter": "TrailingFilter"})
    return await call_next(request)


@app.middleware("http")
async def lead_filter(request: Request, call_next):
    logger.info(f"LeadFilter - {request.url.path}", extra={"filter": "LeadFilter"})
    return await call_next(request)


@app.get("/AppVersion", response_class=PlainTextResponse, tags=["Version"])
def app_version():
    """
    Application version: "<releaseTimestamp> <tagVersion>".
    """
    return get_app_version()


@app.get("/health", tags=["Health"])
def health_check():
    """
    Health check endpoint.

    Returns the API status and application version.
    """
    return {
        "status": "healthy",
        "version": get_app_version(),
        "service": "zulu-timestamp-api"
    }


def _generate_response(which: str) -> str:
    message = f"{which} Called"
    logger.info(f"---- {message}")
    return message


@app.get("/a", response_class=PlainTextResponse, tags=["Root"])
def a():
    return _generate_response("a")


@app.get("/b", response_class=PlainTextResponse, tags=["Root"])
def b():
    return _generate_response("b")


# Import and include routers
from api.routers import timestamps

app.include_router(timestamps.router, prefix="/api/v1", tags=["Timestamps"])
