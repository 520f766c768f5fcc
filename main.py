"""
Container Tracking Engine - Main Application

FastAPI application entry point.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
import structlog
from datetime import datetime

from config import settings, check_connection

# Configure structured logging
logging.basicConfig(level=getattr(logging, settings.log_level), format="%(message)s")

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer() if settings.is_production
            else structlog.dev.ConsoleRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup: Report provider configuration
    Shutdown: Log
    """
    logger.info(
        "application_starting",
        environment=settings.environment,
        debug=settings.debug,
        live_api_configured=settings.live_api_configured,
        supabase_configured=settings.supabase_configured
    )

    db_status = check_connection()
    if db_status["status"] == "healthy":
        logger.info("database_connected", containers=db_status["containers_count"])
    elif db_status["status"] == "not_configured":
        logger.warning("database_not_configured")
    else:
        logger.error("database_connection_failed", error=db_status.get("error"))

    yield

    logger.info("application_shutting_down")


# Create FastAPI app
app = FastAPI(
    title="Container Tracking Engine",
    description="Container lifecycle, last-free-day risk and timeline reconciliation",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ===================
# ROUTES
# ===================

@app.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns:
        Basic health status and provider configuration
    """
    db_status = check_connection()

    return {
        "status": "degraded" if db_status["status"] == "unhealthy" else "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "environment": settings.environment,
        "database": db_status,
        "live_api": {"configured": settings.live_api_configured}
    }


@app.get("/")
async def root():
    """
    Root endpoint.

    Returns:
        API information and available endpoints
    """
    return {
        "name": "Container Tracking Engine API",
        "version": "0.1.0",
        "docs": "/docs" if settings.debug else "Disabled in production",
        "health": "/health",
        "endpoints": {
            "tracking": "/api/tracking/{key}?search_by=container|houseBill"
        }
    }


# ===================
# ERROR HANDLERS
# ===================

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler.

    Catches unhandled exceptions and returns standard error format.
    """
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "details": str(exc) if settings.debug else None,
                "timestamp": datetime.utcnow().isoformat()
            }
        }
    )


# ===================
# INCLUDE ROUTERS
# ===================
from routes.tracking import router as tracking_router

app.include_router(tracking_router)  # Prefix already in router


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
