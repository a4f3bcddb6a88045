"""
Pydantic models for the mock employee store.

``MockEmployee`` is the stored record.  ``CreateMockEmployeeInput``
and ``DeleteMockEmployeeInput`` are request bodies; their constraints
are enforced by FastAPI before a handler runs.  Every response is
wrapped in ``Envelope``.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

STATUS_HANDLED = "Successfully processed request."
STATUS_ERROR = "Failed to process request."


class CreateMockEmployeeInput(BaseModel):
    """Body of ``POST /employee``."""

    name: str = Field(..., min_length=1, pattern=r"\S", examples=["John Doe"])
    salary: int = Field(..., gt=0, examples=[75000])
    age: int = Field(..., ge=16, le=75, examples=[30])
    title: str = Field(..., min_length=1, pattern=r"\S", examples=["Software Engineer"])


class DeleteMockEmployeeInput(BaseModel):
    """Body of ``DELETE /employee``."""

    name: str = Field(..., min_length=1, pattern=r"\S")


class MockEmployee(BaseModel):
    """An employee record held by the store."""

    id: str
    name: str
    title: str
    salary: int
    age: int
    email: str


class Envelope(BaseModel):
    """Wrapper around every payload returned by the store."""

    data: Any = None
    status: str = STATUS_HANDLED
    statusCode: int = 200
    error: Optional[str] = None


def handled_with(data: Any) -> Envelope:
    """Envelope for a successfully processed request."""
    return Envelope(data=data)


def failed(status_code: int, error: str) -> Envelope:
    """Envelope for a request the store could not serve."""
    return Envelope(data=None, status=STATUS_ERROR, statusCode=status_code, error=error)
