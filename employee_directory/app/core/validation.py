"""
Input checks performed by the facade before calling the employee store.

Invalid input never reaches the store: each check raises
``EmployeeValidationError`` with a message describing the first rule
that failed.
"""

from typing import Optional

from ..schemas.employee import EmployeeInput
from .errors import EmployeeValidationError

MIN_AGE = 16
MAX_AGE = 75


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_employee_input(data: Optional[EmployeeInput]) -> None:
    """Reject an employee payload that the store would not accept."""
    if data is None:
        raise EmployeeValidationError("Employee input cannot be null")
    if _is_blank(data.name):
        raise EmployeeValidationError("Employee name cannot be blank")
    if data.salary is None:
        raise EmployeeValidationError("Employee salary cannot be null")
    if data.salary <= 0:
        raise EmployeeValidationError("Employee salary must be positive")
    if data.age is None:
        raise EmployeeValidationError("Employee age cannot be null")
    if data.age < MIN_AGE or data.age > MAX_AGE:
        raise EmployeeValidationError(f"Employee age must be between {MIN_AGE} and {MAX_AGE}")
    if _is_blank(data.title):
        raise EmployeeValidationError("Employee title cannot be blank")


def validate_employee_id(employee_id: Optional[str]) -> None:
    """Reject a missing or blank employee identifier."""
    if _is_blank(employee_id):
        raise EmployeeValidationError("Employee ID cannot be blank")
