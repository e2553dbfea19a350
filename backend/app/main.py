from __future__ import annotations

import logging
import sys
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stderr)]
)
logger = logging.getLogger(__name__)

from .config import settings
from .core.deps import get_db
from .core.errors import INVALID_PAYLOAD
from .database import Base, SessionLocal, engine
from .routers import trainer

# Create tables with error handling
try:
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified successfully")
except Exception as e:
    logger.error(f"Failed to create database tables: {e}")
    # Don't raise - allow app to start for health checks

app = FastAPI(
    title=settings.app_name,
    description="Trainer coaching API: profiles, trainees, programs, requests and weekly plans",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_security_headers(request, call_next):
    """Add security headers to responses."""
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["X-XSS-Protection"] = "1; mode=block"
    response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as ``{"message": ...}``."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON and failed field validation are both 400."""
    logger.warning(f"Invalid payload for {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": INVALID_PAYLOAD, "errors": jsonable_encoder(exc.errors())},
    )


@app.get("/")
async def root():
    """
    Root endpoint - returns basic application info.
    """
    return {
        "app": settings.app_name,
        "status": "running",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }


@app.get("/ping")
async def ping():
    """
    Simple ping endpoint - always returns pong.
    Use this for basic availability checks.
    """
    return {"ping": "pong", "timestamp": datetime.utcnow().isoformat()}


@app.get("/health")
def health_check():
    """
    Health check endpoint with database connectivity test.

    Returns:
        Health status including database connectivity
    """
    from .core.monitoring import check_database_health

    db_health = {"status": "unknown", "connected": False}
    try:
        db = SessionLocal()
        try:
            db_health = check_database_health(db)
        finally:
            db.close()
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        db_health = {
            "status": "unhealthy",
            "connected": False,
            "error": str(e)
        }

    return {
        "status": "ok" if db_health.get("connected") else "degraded",
        "app": settings.app_name,
        "timestamp": datetime.utcnow().isoformat(),
        "environment": settings.environment,
        "database": db_health
    }


@app.get("/version")
async def version_info():
    """
    Version information endpoint.

    Returns:
        Application version and build information
    """
    from .core.monitoring import get_version_info

    return get_version_info()


# Protected routes
app.include_router(trainer.router, prefix="/trainer", tags=["trainer"])

__all__ = ["app", "get_db"]
