"""
Top-level router for version 1 of the mock employee store.

Mirrors the layout of the public API so both services expose the
employee collection under ``/api/v1/employee``.
"""

from fastapi import APIRouter

from .endpoints import employees

router = APIRouter()

router.include_router(employees.router, prefix="/employee", tags=["mock employees"])
