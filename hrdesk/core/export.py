"""CSV rendering of the employee table."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable

from hrdesk.models.employee import Employee

CSV_HEADER = ["Name", "Email", "Role", "Department", "Salary", "Attendance"]


def _format_salary(value: float | None) -> str:
    if value is None:
        return ""
    # 50000.0 -> "50000"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def employees_to_csv(rows: Iterable[Employee]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for emp in rows:
        writer.writerow(
            [
                emp.name,
                emp.email,
                emp.role,
                emp.department,
                _format_salary(emp.salary),
                emp.attendance,
            ]
        )
    return buf.getvalue()
