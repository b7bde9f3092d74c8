"""Main FastAPI application for Career Inbox."""

import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse

from career_inbox import __version__
from career_inbox.api import routes as routes_module
from career_inbox.api.models import ErrorResponse
from career_inbox.api.routes import all_routers
from career_inbox.config import settings
from career_inbox.parsing.pipeline import ApplicationEmailParser
from career_inbox.parsing.registry import PlatformRegistry, default_registry
from career_inbox.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(registry: Optional[PlatformRegistry] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Career Inbox API")
        routes_module.parser = ApplicationEmailParser(
            registry=registry if registry is not None else default_registry()
        )
        logger.info("Email parser ready", platforms=list(routes_module.parser.registry.names))
        yield
        logger.info("Shutting down Career Inbox API")
    
    app = FastAPI(
        title="Career Inbox API",
        description="Import job applications from confirmation emails and analyse application history",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan
    )
    
    # Add middleware
    setup_middleware(app)
    
    # Add exception handlers
    setup_exception_handlers(app)
    
    # Include routers
    for router in all_routers:
        app.include_router(router, prefix="/api/v1")
    
    @app.get("/")
    def root():
        return {
            "name": "Career Inbox API",
            "version": __version__,
            "status": "running",
            "docs": "/docs" if settings.debug else "disabled"
        }
    
    return app


def setup_middleware(app: FastAPI) -> None:
    """Setup application middleware."""
    
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    
    # Trusted host middleware
    if settings.allowed_hosts:
        app.add_middleware(
            TrustedHostMiddleware,
            allowed_hosts=settings.allowed_hosts
        )
    
    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_seconds=round(time.perf_counter() - start_time, 4)
        )
        return response


def setup_exception_handlers(app: FastAPI) -> None:
    """Setup global exception handlers."""
    
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logger.warning(
            "HTTP exception",
            status_code=exc.status_code,
            detail=exc.detail,
            path=request.url.path
        )
        
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error="HTTPException",
                message=str(exc.detail),
                timestamp=datetime.now(timezone.utc)
            ).model_dump(mode="json")
        )
    
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "Validation error",
            error_count=len(exc.errors()),
            path=request.url.path
        )
        
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error="ValidationError",
                message="Request validation failed",
                details={"validation_errors": jsonable_encoder(exc.errors())},
                timestamp=datetime.now(timezone.utc)
            ).model_dump(mode="json")
        )


configure_logging()

# Create the application instance
app = create_app()
