"""
FastAPI application for OpenAntrag Display.

Provides JSON lookups for parliaments and proposals, and the rendered
proposal list fragment.

Responsibility: Main API application setup and configuration
"""

# Load .env BEFORE importing settings (critical for pydantic-settings)
from dotenv import load_dotenv
load_dotenv('.env', override=True)

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from openantrag.adapters.openantrag_client import OpenAntragClient
from openantrag.config import settings
from openantrag.services.display_service import ProposalDisplayService

# Configure logging
logging.basicConfig(
    level=settings.app.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the OpenAntrag client once and close it on shutdown"""
    logger.info("Starting OpenAntrag Display API...")
    logger.info(f"Environment: {settings.app.environment}")
    logger.info(f"OpenAntrag API host: {settings.openantrag.api_host}")

    client = OpenAntragClient()
    app.state.openantrag_client = client
    app.state.display_service = ProposalDisplayService(client)
    try:
        yield
    finally:
        logger.info("Shutting down OpenAntrag Display API...")
        client.close()


# Create FastAPI app
app = FastAPI(
    title="OpenAntrag Display API",
    description="Latest OpenAntrag proposals as JSON and HTML fragments",
    version=settings.app.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

logger.info(f"CORS Origins configured: {settings.app.cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.app.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,  # Cache preflight for 1 hour
)


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": settings.app.app_name,
        "version": settings.app.app_version,
        "status": "operational",
        "endpoints": {
            "display_name": "/api/v1/parliaments/{parliament}/name",
            "process_steps": "/api/v1/parliaments/{parliament}/process-steps",
            "proposals": "/api/v1/parliaments/{parliament}/proposals",
            "display": "/api/v1/parliaments/{parliament}/display",
            "docs": "/docs"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "openantrag-display-api"
    }


# Exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if settings.app.debug else "An unexpected error occurred"
        }
    )


# Import and include routers
from api.v1.endpoints import parliaments

app.include_router(
    parliaments.router,
    prefix="/api/v1",
    tags=["parliaments"]
)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.app.api_host,
        port=settings.app.api_port,
        reload=settings.app.debug
    )
