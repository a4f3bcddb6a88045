"""
Pydantic models for employee data exposed by the facade API.

The employee store speaks its own record shape (``name``, ``salary``
and so on).  API consumers expect the ``employee_`` prefixed field
names, so ``Employee`` declares those as aliases and is always
serialized by alias.  ``Employee.from_store_record`` performs the
translation from the store's shape.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class EmployeeInput(BaseModel):
    """Payload for creating an employee.

    Every field is optional at the schema level so that missing values
    reach ``validate_employee_input`` and produce a descriptive 400
    rather than a generic schema error.
    """

    name: Optional[str] = Field(None, examples=["Jane Smith"])
    salary: Optional[int] = Field(None, examples=[85000])
    age: Optional[int] = Field(None, examples=[35])
    title: Optional[str] = Field(None, examples=["Senior Developer"])


class Employee(BaseModel):
    """An employee as returned by the facade API."""

    id: str
    name: str = Field(..., alias="employee_name")
    title: str = Field(..., alias="employee_title")
    salary: int = Field(..., alias="employee_salary")
    age: int = Field(..., alias="employee_age")
    email: str = Field(..., alias="employee_email")

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_store_record(cls, record: Dict[str, Any]) -> "Employee":
        """Build an ``Employee`` from a record in the employee store's shape."""
        return cls(
            id=str(record["id"]),
            name=record["name"],
            title=record["title"],
            salary=record["salary"],
            age=record["age"],
            email=record["email"],
        )
