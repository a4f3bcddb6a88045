"""
Employee endpoints for API v1.

These routes are the public face of the employee directory.  Each
handler delegates to ``EmployeeService``, which talks to the employee
store over HTTP, and translates domain errors into HTTP errors:

* ``EmployeeValidationError`` -> 400
* ``RateLimitedError`` -> 503 (``Retry-After`` forwarded)
* ``UpstreamTransportError`` -> 502
* ``UpstreamContractError`` -> 500

Handlers are plain functions because the store client blocks; FastAPI
runs them in its threadpool.  Static paths such as ``/highestSalary``
are declared before ``/{employee_id}`` so they are not captured by it.
"""

from typing import List, NoReturn

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from employee_directory.app.core.errors import (
    EmployeeValidationError,
    RateLimitedError,
    UpstreamContractError,
    UpstreamError,
)
from employee_directory.app.schemas.employee import Employee, EmployeeInput
from employee_directory.app.services.employee_service import EmployeeService


router = APIRouter()


def get_employee_service(request: Request) -> EmployeeService:
    """Return the service instance owned by the running application."""
    return request.app.state.employee_service


def _raise_http(exc: Exception) -> NoReturn:
    if isinstance(exc, EmployeeValidationError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    if isinstance(exc, RateLimitedError):
        headers = {"Retry-After": exc.retry_after} if exc.retry_after else None
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Employee store is rate limiting requests: {exc}",
            headers=headers,
        ) from exc
    if isinstance(exc, UpstreamContractError):
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    raise HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=f"Employee store request failed: {exc}",
    ) from exc


@router.get("", response_model=List[Employee])
def list_employees(service: EmployeeService = Depends(get_employee_service)) -> List[Employee]:
    """Return every employee.

    Never fails: if the employee store cannot be reached the list is
    empty.
    """
    return service.list_all()


@router.get("/search/{search_string}", response_model=List[Employee])
def search_employees(
    search_string: str,
    service: EmployeeService = Depends(get_employee_service),
) -> List[Employee]:
    """Return employees whose name contains ``search_string`` (case insensitive)."""
    try:
        return service.search_by_name(search_string)
    except UpstreamError as exc:
        _raise_http(exc)


@router.get("/highestSalary", response_model=int)
def highest_salary(service: EmployeeService = Depends(get_employee_service)) -> int:
    """Return the highest salary in the directory, 0 when it is empty."""
    try:
        return service.highest_salary()
    except UpstreamError as exc:
        _raise_http(exc)


@router.get("/topTenHighestEarningEmployeeNames", response_model=List[str])
def top_ten_highest_earning_employee_names(
    service: EmployeeService = Depends(get_employee_service),
) -> List[str]:
    """Return the names of the ten best paid employees, best paid first."""
    try:
        return service.top_ten_highest_earners()
    except UpstreamError as exc:
        _raise_http(exc)


@router.get("/{employee_id}", response_model=Employee)
def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Retrieve a single employee by id.  Returns 404 if it does not exist."""
    try:
        employee = service.get_by_id(employee_id)
    except (EmployeeValidationError, UpstreamError) as exc:
        _raise_http(exc)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.post("", response_model=Employee)
def create_employee(
    employee_in: EmployeeInput,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Create a new employee.

    The payload is validated here; invalid input is rejected with 400
    and never reaches the employee store.
    """
    try:
        employee = service.create_employee(employee_in)
    except (EmployeeValidationError, UpstreamError) as exc:
        _raise_http(exc)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee could not be created")
    return employee


@router.delete("/{employee_id}", response_class=PlainTextResponse)
def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> str:
    """Delete an employee by id.

    Always answers 200 with a plain text message describing the
    outcome (deleted, not found, ambiguous name or failure).  Only a
    blank id is rejected with 400.
    """
    try:
        return service.delete_by_id(employee_id)
    except EmployeeValidationError as exc:
        _raise_http(exc)
