import pytest

from employee_directory.app.core.errors import EmployeeValidationError
from employee_directory.app.core.validation import validate_employee_id, validate_employee_input
from employee_directory.app.schemas.employee import EmployeeInput

VALID = {"name": "John Doe", "salary": 75000, "age": 30, "title": "Software Engineer"}


def test_valid_input_passes():
    validate_employee_input(EmployeeInput(**VALID))


@pytest.mark.parametrize("age", [16, 75])
def test_age_bounds_are_inclusive(age):
    validate_employee_input(EmployeeInput(**{**VALID, "age": age}))


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"name": None}, "Employee name cannot be blank"),
        ({"name": "  "}, "Employee name cannot be blank"),
        ({"salary": None}, "Employee salary cannot be null"),
        ({"salary": 0}, "Employee salary must be positive"),
        ({"salary": -10}, "Employee salary must be positive"),
        ({"age": None}, "Employee age cannot be null"),
        ({"age": 15}, "Employee age must be between 16 and 75"),
        ({"age": 76}, "Employee age must be between 16 and 75"),
        ({"title": ""}, "Employee title cannot be blank"),
    ],
)
def test_invalid_input_is_rejected(changes, message):
    with pytest.raises(EmployeeValidationError, match=message):
        validate_employee_input(EmployeeInput(**{**VALID, **changes}))


def test_missing_input_is_rejected():
    with pytest.raises(EmployeeValidationError, match="cannot be null"):
        validate_employee_input(None)


@pytest.mark.parametrize("employee_id", [None, "", "   "])
def test_blank_id_is_rejected(employee_id):
    with pytest.raises(EmployeeValidationError, match="Employee ID cannot be blank"):
        validate_employee_id(employee_id)


def test_id_is_accepted():
    validate_employee_id("4a3a170b-22cd-4ac2-aad1-9bb5b34a1507")
