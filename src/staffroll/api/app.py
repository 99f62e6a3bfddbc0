"""FastAPI application with lifespan, error mapping and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from staffroll.api.routes import employees, health
from staffroll.core.config import AppSettings
from staffroll.core.exceptions import DecodeError, StorageError, ValidationError
from staffroll.core.logging_config import setup_logging
from staffroll.persistence import create_repository
from staffroll.persistence.employee_repository import EmployeeRepository


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings: AppSettings = app.state.settings
    setup_logging(settings.log_level)
    if getattr(app.state, "repository", None) is None:
        app.state.repository = create_repository(settings)
    yield


async def _unprocessable(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def _storage_unavailable(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=503, content={"detail": str(exc)})


def create_app(settings: AppSettings | None = None,
               repository: EmployeeRepository | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Staffroll Employee Records",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings or AppSettings()
    app.state.repository = repository

    app.add_exception_handler(ValidationError, _unprocessable)
    app.add_exception_handler(DecodeError, _unprocessable)
    app.add_exception_handler(StorageError, _storage_unavailable)

    app.include_router(health.router)
    app.include_router(employees.router)
    return app
