"""
Employee endpoints of the mock employee store.

Every response body is an ``Envelope``.  The store instance and the
rate limiter come from ``app.state`` through dependencies, so tests
can build an application around any store they like.

Handlers are plain functions; FastAPI runs them in its threadpool and
the store's lock serialises access to the shared list.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from employee_directory.app.core.errors import EmployeeNotFoundError
from employee_directory.mock_server.schemas.employee import (
    CreateMockEmployeeInput,
    DeleteMockEmployeeInput,
    Envelope,
    failed,
    handled_with,
)
from employee_directory.mock_server.services.employee_store import EmployeeStore


def get_store(request: Request) -> EmployeeStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def enforce_rate_limit(request: Request) -> None:
    """Reject the request with 429 when the rate limiter says so."""
    decision = request.app.state.rate_limiter.check()
    if not decision.allowed:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many requests",
            headers={"Retry-After": str(decision.retry_after)},
        )


router = APIRouter(dependencies=[Depends(enforce_rate_limit)])


@router.get("", response_model=Envelope)
def get_employees(store: EmployeeStore = Depends(get_store)) -> Envelope:
    return handled_with(store.list_all())


@router.get("/search/{search_string}", response_model=Envelope)
def get_employees_by_name_search(search_string: str, store: EmployeeStore = Depends(get_store)) -> Envelope:
    return handled_with(store.search_by_name_fragment(search_string))


@router.get("/highestSalary", response_model=Envelope)
def get_highest_salary(store: EmployeeStore = Depends(get_store)) -> Envelope:
    return handled_with(store.highest_salary())


@router.get("/topTenHighestEarningEmployeeNames", response_model=Envelope)
def get_top_ten_highest_earning_employee_names(store: EmployeeStore = Depends(get_store)) -> Envelope:
    return handled_with(store.top_n_by_earnings(10))


@router.get("/{employee_id}", response_model=Envelope)
def get_employee(employee_id: str, store: EmployeeStore = Depends(get_store)):
    """Return one record, or 404 with an empty envelope."""
    try:
        return handled_with(store.get_by_id(employee_id))
    except EmployeeNotFoundError as exc:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=jsonable_encoder(failed(status.HTTP_404_NOT_FOUND, str(exc))),
        )


@router.post("", response_model=Envelope)
def create_employee(data: CreateMockEmployeeInput, store: EmployeeStore = Depends(get_store)) -> Envelope:
    return handled_with(store.create(data))


@router.delete("", response_model=Envelope)
def delete_employee(data: DeleteMockEmployeeInput, store: EmployeeStore = Depends(get_store)) -> Envelope:
    """Remove the first employee with the given name.

    Names are not unique, so this may not remove the record a caller
    had in mind.  Use ``DELETE /{employee_id}`` to target one record.
    """
    return handled_with(store.delete_by_name(data.name))


@router.delete("/{employee_id}", response_model=Envelope)
def delete_employee_by_id(employee_id: str, store: EmployeeStore = Depends(get_store)) -> Envelope:
    return handled_with(store.delete_by_id(employee_id))
