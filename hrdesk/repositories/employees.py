"""
Employee repository — thin data access over the ``employees`` table.

Mutations by id do not check for existence: updating or deleting a
missing id is a no-op that reports ``False`` instead of raising.
"""

from __future__ import annotations

from sqlalchemy import delete as sa_delete
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hrdesk.models.employee import Employee
from hrdesk.schemas.employee import EmployeeCreate


class EmployeeRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list(self) -> list[Employee]:
        result = await self.db.execute(select(Employee).order_by(Employee.id))
        return list(result.scalars().all())

    async def create(self, fields: EmployeeCreate, photo: str = "") -> int:
        employee = Employee(**fields.model_dump(), photo=photo)
        self.db.add(employee)
        await self.db.commit()
        await self.db.refresh(employee)
        return employee.id

    async def update_attendance(self, employee_id: int, status: str) -> bool:
        """Overwrite the attendance field; True if a row matched."""
        result = await self.db.execute(
            update(Employee).where(Employee.id == employee_id).values(attendance=status)
        )
        await self.db.commit()
        return result.rowcount > 0

    async def delete(self, employee_id: int) -> bool:
        result = await self.db.execute(sa_delete(Employee).where(Employee.id == employee_id))
        await self.db.commit()
        return result.rowcount > 0
