"""Integration tests for the employee repository on LocalStack S3."""

from __future__ import annotations

from decimal import Decimal

from staffroll.models.employee import HourlyEmployee, Manager
from staffroll.persistence.employee_repository import EmployeeRepository
from staffroll.persistence.s3_backend import S3TextStore

from tests.integration.conftest import BUCKET, LOCALSTACK_URL, skip_no_localstack


def _store(key: str) -> S3TextStore:
    return S3TextStore(bucket=BUCKET, key=key, region="us-east-1", endpoint_url=LOCALSTACK_URL)


@skip_no_localstack
class TestRepositoryOnLocalStack:
    def test_missing_object_starts_empty(self, localstack_s3, object_key):
        assert len(EmployeeRepository(_store(object_key))) == 0

    def test_write_through_and_reload(self, localstack_s3, object_key):
        repo = EmployeeRepository(_store(object_key))
        repo.add(HourlyEmployee(employee_id="E2", name="Bo", department="Ops", hourly_rate=10, hours_worked=20))
        repo.add(Manager(employee_id="E3", name="Cy", department="Ops", monthly_salary=2000, bonus=300))

        reloaded = EmployeeRepository(_store(object_key))
        assert list(reloaded) == list(repo)
        assert reloaded.total_payroll() == Decimal("2500")

    def test_corrupt_object_line_is_skipped(self, localstack_s3, object_key):
        localstack_s3.put_object(
            Bucket=BUCKET, Key=object_key,
            Body=b"{type=hourly, employee_id=E2, name=Bo, department=Ops, hourly_rate=1, hours_worked=1}\nbroken\n",
        )
        repo = EmployeeRepository(_store(object_key))
        assert len(repo) == 1
        assert len(repo.skipped_lines) == 1
