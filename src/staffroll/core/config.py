"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class StorageConfig(BaseSettings):
    """Backing store selection."""

    model_config = {"env_prefix": "STAFFROLL_STORAGE_"}

    backend: Literal["file", "s3"] = "file"
    data_file: str = "employees.dat"
    encoding: str = "utf-8"


class S3Config(BaseSettings):
    """S3 object used as the backing store when ``backend == "s3"``."""

    model_config = {"env_prefix": "STAFFROLL_S3_"}

    bucket: str = "staffroll-data"
    key: str = "employees.dat"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class ReportConfig(BaseSettings):
    """Payroll report rendering."""

    model_config = {"env_prefix": "STAFFROLL_REPORT_"}

    currency_symbol: str = "₹"
    width: int = 60


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "STAFFROLL_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    storage: StorageConfig = StorageConfig()
    s3: S3Config = S3Config()
    report: ReportConfig = ReportConfig()
