"""
PlacementLog API - FastAPI Application Entry Point.

Students share placement interview experiences, admins moderate them and
record placement statistics.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from placementlog.core.config import settings
from placementlog.core.database import close_db, init_db
from placementlog.core.exceptions import APIException
from placementlog.core.logging import RequestIDMiddleware, get_logger, setup_logging
from placementlog.core.rate_limit import limiter
from placementlog.api.deps import get_token_service
from placementlog.api.routes import api_router
from placementlog.schemas.base import error_body

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler: startup and shutdown."""
    setup_logging()
    logger.info("starting_app", app_name=settings.app_name, env=settings.environment)

    # Refuse to start without a usable signing key
    get_token_service()

    await init_db()
    logger.info("database_initialized")

    yield

    logger.info("shutting_down")
    await close_db()


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Placement experience posts with admin moderation and placement statistics",
    version=settings.app_version,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter

# Request ID correlation
app.add_middleware(RequestIDMiddleware)

# CORS middleware with explicit methods and headers
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
)


# Exception handlers - every failure uses the {"err": true, "data": "..."} envelope
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Handle custom API exceptions."""
    message = exc.message
    if settings.debug and exc.details:
        message = f"{message}: {exc.details}"
    return JSONResponse(status_code=exc.status_code, content=error_body(message))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing input is a plain 400."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "invalid request"
    return JSONResponse(status_code=400, content=error_body(message))


@app.exception_handler(RateLimitExceeded)
async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content=error_body(f"rate limit exceeded: {exc.detail}"),
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Log unexpected exceptions in full, return a sanitized message."""
    logger.error(
        "unhandled_exception",
        exc_type=type(exc).__name__,
        exc_message=str(exc),
        path=request.url.path,
        exc_info=True,
    )

    if settings.debug:
        return JSONResponse(status_code=500, content=error_body(str(exc)))

    return JSONResponse(
        status_code=500,
        content=error_body("an unexpected error occurred"),
    )


# Include API routes
app.include_router(api_router)


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint - API info."""
    return {
        "err": False,
        "data": {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs" if settings.debug else None,
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "placementlog.main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.debug,
    )
