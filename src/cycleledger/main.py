"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cycleledger.config.settings import get_settings
from cycleledger.config.logging_config import setup_logging
from cycleledger.repositories.sqlalchemy.database import init_db
from cycleledger.api.routers import (
    accounts_router,
    entries_router,
    forecasts_router,
    periods_router,
    reports_router,
)
from cycleledger.core.exceptions import (
    AppError,
    ConfigurationError,
    InvariantViolationError,
    NotFoundError,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    init_db()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Statement-cycle ledger with forecast reconciliation",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(accounts_router)
app.include_router(entries_router)
app.include_router(forecasts_router)
app.include_router(periods_router)
app.include_router(reports_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    status_code = 400
    if isinstance(exc, NotFoundError):
        status_code = 404
    elif isinstance(exc, ConfigurationError):
        status_code = 422
    elif isinstance(exc, InvariantViolationError):
        status_code = 500
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
