"""Tests for wiring stores and repositories from settings."""

from __future__ import annotations

from moto import mock_aws

from staffroll.core.config import AppSettings, S3Config, StorageConfig
from staffroll.persistence import create_repository, create_text_store
from staffroll.persistence.file_backend import LocalTextStore
from staffroll.persistence.s3_backend import S3TextStore


def test_file_backend_by_default(tmp_path):
    settings = AppSettings(storage=StorageConfig(data_file=str(tmp_path / "staff.dat")))
    store = create_text_store(settings)
    assert isinstance(store, LocalTextStore)
    assert store.location == str(tmp_path / "staff.dat")


def test_s3_backend_selected():
    settings = AppSettings(
        storage=StorageConfig(backend="s3"),
        s3=S3Config(bucket="b", key="k/employees.dat"),
    )
    with mock_aws():
        store = create_text_store(settings)
    assert isinstance(store, S3TextStore)
    assert store.location == "s3://b/k/employees.dat"


def test_create_repository_loads_existing_file(tmp_path):
    path = tmp_path / "staff.dat"
    path.write_text(
        "{type=hourly, employee_id=E2, name=Bo, department=Ops, hourly_rate=10, hours_worked=20}\n",
        encoding="utf-8",
    )
    repo = create_repository(AppSettings(storage=StorageConfig(data_file=str(path))))
    assert repo.find_by_id("E2").compute_pay() == 200
