"""Employee CRUD and payroll endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from staffroll.models.employee import Employee, employee_from_field_map
from staffroll.models.reports import build_payroll_report
from staffroll.persistence.employee_repository import EmployeeRepository

router = APIRouter(tags=["employees"])


def get_repository(request: Request) -> EmployeeRepository:
    return request.app.state.repository


def _to_json(employee: Employee) -> dict[str, Any]:
    body: dict[str, Any] = {key: str(value) for key, value in employee.to_field_map().items()}
    body["pay"] = str(employee.compute_pay())
    return body


def _get_or_404(repository: EmployeeRepository, employee_id: str) -> Employee:
    employee = repository.find_by_id(employee_id)
    if employee is None:
        raise HTTPException(status_code=404, detail=f"Employee {employee_id!r} not found")
    return employee


@router.get("/employees")
async def list_employees(
    name: str | None = None,
    repository: EmployeeRepository = Depends(get_repository),
) -> list[dict[str, Any]]:
    """All employees, or those whose name contains *name*."""
    found = repository.list_all() if name is None else repository.find_by_name(name)
    return [_to_json(e) for e in found]


@router.get("/employees/{employee_id}")
async def get_employee(
    employee_id: str, repository: EmployeeRepository = Depends(get_repository),
) -> dict[str, Any]:
    return _to_json(_get_or_404(repository, employee_id))


@router.post("/employees", status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: dict[str, Any] = Body(...),
    repository: EmployeeRepository = Depends(get_repository),
) -> dict[str, Any]:
    """Create an employee from a field map (``type`` plus the variant's fields)."""
    employee = employee_from_field_map(payload)
    if not repository.add(employee):
        raise HTTPException(
            status_code=409, detail=f"Employee {employee.employee_id!r} already exists",
        )
    return _to_json(employee)


@router.patch("/employees/{employee_id}")
async def update_employee(
    employee_id: str,
    changes: dict[str, Any] = Body(...),
    repository: EmployeeRepository = Depends(get_repository),
) -> dict[str, Any]:
    if not repository.update(employee_id, **changes):
        raise HTTPException(status_code=404, detail=f"Employee {employee_id!r} not found")
    return _to_json(_get_or_404(repository, employee_id))


@router.delete("/employees/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str, repository: EmployeeRepository = Depends(get_repository),
) -> Response:
    if not repository.remove(employee_id):
        raise HTTPException(status_code=404, detail=f"Employee {employee_id!r} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/payroll")
async def payroll(repository: EmployeeRepository = Depends(get_repository)) -> dict[str, Any]:
    report = build_payroll_report(repository.list_all())
    return report.model_dump(mode="json")
