"""Pluggable text stores and the employee repository built on them."""

from __future__ import annotations

from staffroll.core.config import AppSettings
from staffroll.core.protocols import ITextStore
from staffroll.persistence.employee_repository import EmployeeRepository
from staffroll.persistence.file_backend import LocalTextStore
from staffroll.persistence.s3_backend import S3TextStore


def create_text_store(settings: AppSettings | None = None) -> ITextStore:
    """Create the backing store selected by ``settings.storage.backend``."""
    if settings is None:
        settings = AppSettings()

    if settings.storage.backend == "s3":
        return S3TextStore(
            bucket=settings.s3.bucket,
            key=settings.s3.key,
            region=settings.s3.region,
            endpoint_url=settings.s3.endpoint_url,
            encoding=settings.storage.encoding,
        )
    return LocalTextStore(settings.storage.data_file, encoding=settings.storage.encoding)


def create_repository(settings: AppSettings | None = None) -> EmployeeRepository:
    """Create a loaded repository from application settings."""
    return EmployeeRepository(create_text_store(settings))
