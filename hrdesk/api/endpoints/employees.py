"""
Employee endpoints.

- GET operations require any authenticated session.
- POST / PUT / DELETE operations require the admin role.
- Attendance update and delete answer ``{"success": true}`` even when the
  id matches no row.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hrdesk.api.deps import (get_db, get_employee_repository,
                             get_upload_store, require_admin,
                             require_authenticated)
from hrdesk.core.export import employees_to_csv
from hrdesk.core.sessions import SessionData
from hrdesk.core.uploads import UploadStore
from hrdesk.models.employee import Employee
from hrdesk.repositories.employees import EmployeeRepository
from hrdesk.schemas.auth import SuccessResponse
from hrdesk.schemas.employee import (AttendanceUpdate, EmployeeCreate,
                                     EmployeeCreated, EmployeeRead,
                                     HealthResponse)

router = APIRouter(prefix="/api", tags=["employees"])
logger = logging.getLogger(__name__)


# ── Employee CRUD ───────────────────────────────────────────────────
@router.get("/employees", response_model=list[EmployeeRead])
async def list_employees(
    repo: EmployeeRepository = Depends(get_employee_repository),
    _session: SessionData = Depends(require_authenticated),
) -> list[Employee]:
    return await repo.list()


@router.post("/employees", response_model=EmployeeCreated)
async def create_employee(
    _admin: SessionData = Depends(require_admin),
    name: str = Form(...),
    email: str = Form(...),
    role: str = Form(...),
    department: str = Form(...),
    salary: float = Form(..., allow_inf_nan=False),
    photo: Optional[UploadFile] = File(None),
    repo: EmployeeRepository = Depends(get_employee_repository),
    uploads: UploadStore = Depends(get_upload_store),
) -> EmployeeCreated:
    """Create an employee from a form post, with an optional photo file."""
    fields = EmployeeCreate(
        name=name, email=email, role=role, department=department, salary=salary
    )
    filename = await uploads.save(photo)
    employee_id = await repo.create(fields, photo=filename)
    logger.info("Created employee %d (%s)", employee_id, fields.name)
    return EmployeeCreated(success=True, id=employee_id)


@router.get("/employees/export")
async def export_employees(
    repo: EmployeeRepository = Depends(get_employee_repository),
    _session: SessionData = Depends(require_authenticated),
) -> Response:
    """Download the employee table as CSV."""
    return Response(
        content=employees_to_csv(await repo.list()),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=employees.csv"},
    )


@router.put("/attendance/{employee_id}", response_model=SuccessResponse)
async def update_attendance(
    employee_id: int,
    body: AttendanceUpdate,
    repo: EmployeeRepository = Depends(get_employee_repository),
    _admin: SessionData = Depends(require_admin),
) -> SuccessResponse:
    matched = await repo.update_attendance(employee_id, body.status)
    if matched:
        logger.info("Attendance of employee %d set to %r", employee_id, body.status)
    else:
        logger.warning("Attendance update matched no employee (id %d)", employee_id)
    return SuccessResponse(success=True)


@router.delete("/employees/{employee_id}", response_model=SuccessResponse)
async def delete_employee(
    employee_id: int,
    repo: EmployeeRepository = Depends(get_employee_repository),
    _admin: SessionData = Depends(require_admin),
) -> SuccessResponse:
    """Hard-delete an employee row. The stored photo file is kept."""
    if await repo.delete(employee_id):
        logger.info("Deleted employee %d", employee_id)
    else:
        logger.warning("Delete matched no employee (id %d)", employee_id)
    return SuccessResponse(success=True)


# ── Health ──────────────────────────────────────────────────────────
@router.get("/health", response_model=HealthResponse)
async def health(db: AsyncSession = Depends(get_db)) -> HealthResponse:
    """Public health check — DB connectivity."""
    result = HealthResponse(db=False)
    try:
        await db.execute(select(1))
        result.db = True
    except Exception as e:
        logger.error("Health check DB failure: %s", e)
    return result
