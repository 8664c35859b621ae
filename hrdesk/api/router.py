"""
API router aggregator — wires all endpoint modules together.
"""

from fastapi import APIRouter

from hrdesk.api.endpoints import auth, employees

api_router = APIRouter()

# Login, logout, current session
api_router.include_router(auth.router)

# Employees, attendance, CSV export, health
api_router.include_router(employees.router)
