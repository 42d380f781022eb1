"""
Invoice Dashboard - FastAPI Application

Main entry point for the dashboard server.
Environment-agnostic: configuration reads from settings (.env file).
"""

import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, RedirectResponse

from invoice_dashboard import __version__
from invoice_dashboard.errors import ConfigurationError, RedirectRequired
from invoice_dashboard.logging_setup import setup_logging
from invoice_dashboard.settings import get_settings
from api.routers import auth, customers, dashboard, health, invoice_actions, invoices
from api.services.session_service import set_session_cookie

# Get settings
cfg = get_settings()

# Configure logging
setup_logging(cfg.log_level)
logger = logging.getLogger(__name__)


async def redirect_handler(request: Request, exc: RedirectRequired) -> RedirectResponse:
    """
    Turn a RedirectRequired raised anywhere into a 303 See Other.

    A session cookie refreshed earlier in the request is carried over to the
    redirect.
    """
    logger.debug(f"Redirecting {request.url.path} -> {exc.location}")
    response = RedirectResponse(exc.location, status_code=303)
    refreshed = getattr(request.state, "refreshed_session", None)
    if refreshed is not None:
        auth, cookie = refreshed
        set_session_cookie(response, auth, cookie)
    return response


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> PlainTextResponse:
    logger.error(f"Configuration error on {request.url.path}: {exc}")
    return PlainTextResponse(f"Error: {exc}", status_code=500)


def create_app() -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Configuration is loaded from settings (reads from .env file).

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Invoice Dashboard API",
        description="Dashboard data, form actions and sessions over the invoicing backend API",
        version=__version__,
    )

    # CORS configuration from settings
    logger.info(f"Configuring CORS with origins: {cfg.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RedirectRequired, redirect_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)

    # Mount routers
    app.include_router(customers.router, prefix="/api", tags=["customers"])
    app.include_router(invoices.router, prefix="/api", tags=["invoices"])
    app.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
    app.include_router(invoice_actions.router, prefix="/dashboard", tags=["actions"])
    app.include_router(auth.router, tags=["auth"])
    app.include_router(health.router, prefix="/api/v1/health", tags=["health"])

    logger.info(f"FastAPI application created (env={cfg.env})")

    return app


# Create app instance
app = create_app()


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Invoice Dashboard API",
        "version": __version__,
        "environment": cfg.env,
        "status": "running",
        "docs": "/docs",
        "health": "/api/v1/health/ready"
    }


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting API server on {cfg.api_host}:{cfg.api_port}")
    logger.info(f"Environment: {cfg.env}")
    logger.info(f"Reload: {cfg.api_reload}")
    logger.info(f"Workers: {cfg.api_workers}")

    uvicorn.run(
        "api.main:app",
        host=cfg.api_host,
        port=cfg.api_port,
        reload=cfg.api_reload,
        workers=cfg.api_workers if not cfg.api_reload else 1,  # Workers only work without reload
        log_level=cfg.log_level.lower()
    )
