import pytest
import requests
from fastapi.testclient import TestClient

from employee_directory.app.core.errors import (
    EmployeeValidationError,
    RateLimitedError,
    UpstreamContractError,
)
from employee_directory.app.schemas.employee import EmployeeInput
from employee_directory.app.services.employee_service import EmployeeService
from employee_directory.app.services.upstream_client import EmployeeStoreClient
from employee_directory.mock_server.main import create_app as create_store_app
from employee_directory.mock_server.services.employee_store import EmployeeStore
from employee_directory.mock_server.services.rate_limiter import SlidingWindowRateLimiter

from .fakes import FakeResponse, FakeSession

STORE_URL = "http://testserver/api/v1/employee"


def service_over(store, rate_limiter=None):
    app = create_store_app(store=store, rate_limiter=rate_limiter or SlidingWindowRateLimiter(0, 60))
    return EmployeeService(EmployeeStoreClient(base_url=STORE_URL, session=TestClient(app)))


def fake_service(*outcomes):
    return EmployeeService(EmployeeStoreClient(base_url=STORE_URL, session=FakeSession(*outcomes)))


def test_list_all_translates_records(service, employees):
    result = service.list_all()

    assert [emp.id for emp in result] == [emp.id for emp in employees]
    first = result[0]
    assert (first.name, first.title, first.salary, first.age, first.email) == (
        "John Doe",
        "Software Engineer",
        75000,
        30,
        "john.doe@company.com",
    )


def test_list_all_returns_empty_list_when_store_is_down():
    service = fake_service(requests.ConnectionError("connection refused"))

    assert service.list_all() == []


def test_list_all_returns_empty_list_on_malformed_record():
    service = fake_service(FakeResponse(body={"data": [{"id": "1"}]}))

    assert service.list_all() == []


def test_list_all_returns_empty_list_when_rate_limited():
    service = fake_service(FakeResponse(429, headers={"Retry-After": "5"}))

    assert service.list_all() == []


def test_search_with_empty_fragment_matches_everyone(service):
    assert len(service.search_by_name("")) == 3


def test_search_is_case_insensitive(service):
    assert [emp.name for emp in service.search_by_name("JOHN")] == ["John Doe", "Bob Johnson"]


def test_search_propagates_rate_limiting():
    service = fake_service(FakeResponse(429, headers={"Retry-After": "5"}))

    with pytest.raises(RateLimitedError):
        service.search_by_name("john")


def test_get_by_id(service, employees):
    assert service.get_by_id(employees[1].id).name == "Jane Smith"


def test_get_by_id_returns_none_when_missing(service):
    assert service.get_by_id("does-not-exist") is None


@pytest.mark.parametrize("employee_id", [None, "", "  "])
def test_get_by_id_rejects_blank_id(employee_id):
    service = fake_service()

    with pytest.raises(EmployeeValidationError):
        service.get_by_id(employee_id)


def test_highest_salary(employee_factory):
    store = EmployeeStore(
        [
            employee_factory("A", 100000),
            employee_factory("B", 150000),
            employee_factory("C", 120000),
        ]
    )
    service = service_over(store)

    assert service.highest_salary() == 150000


def test_highest_salary_of_empty_directory():
    assert service_over(EmployeeStore()).highest_salary() == 0


def test_top_ten_highest_earners_is_truncated_and_sorted(employee_factory):
    store = EmployeeStore([employee_factory(f"Employee {i}", 1000 * i) for i in range(1, 13)])

    assert service_over(store).top_ten_highest_earners() == [f"Employee {i}" for i in range(12, 2, -1)]


def test_top_ten_with_fewer_employees_returns_all(service):
    assert service.top_ten_highest_earners() == ["Jane Smith", "John Doe", "Bob Johnson"]


def test_top_ten_keeps_store_order_for_equal_salaries(employee_factory):
    store = EmployeeStore(
        [
            employee_factory("Carol White", 50000),
            employee_factory("Alice Brown", 90000),
            employee_factory("Bob Green", 90000),
            employee_factory("Dan Black", 50000),
        ]
    )

    assert service_over(store).top_ten_highest_earners() == ["Alice Brown", "Bob Green", "Carol White", "Dan Black"]


def test_create_then_get_round_trip(service):
    created = service.create_employee(EmployeeInput(name="Alice Brown", salary=95000, age=40, title="Manager"))
    fetched = service.get_by_id(created.id)

    assert fetched == created
    assert (fetched.name, fetched.salary, fetched.age, fetched.title) == ("Alice Brown", 95000, 40, "Manager")
    assert fetched.email


def test_create_rejects_invalid_input_without_calling_store():
    session = FakeSession()
    service = EmployeeService(EmployeeStoreClient(base_url=STORE_URL, session=session))

    with pytest.raises(EmployeeValidationError):
        service.create_employee(EmployeeInput(name="Alice Brown", salary=-1, age=40, title="Manager"))
    assert session.calls == []


def test_create_with_empty_response_is_a_contract_error():
    service = fake_service(FakeResponse(body={"data": None, "status": "ok"}))

    with pytest.raises(UpstreamContractError):
        service.create_employee(EmployeeInput(name="Alice Brown", salary=95000, age=40, title="Manager"))


def test_create_returns_none_when_store_answers_404():
    service = fake_service(FakeResponse(404))

    assert service.create_employee(EmployeeInput(name="Alice Brown", salary=95000, age=40, title="Manager")) is None


def test_delete_by_id_returns_message(service, store, employees):
    message = service.delete_by_id(employees[0].id)

    assert message == f"Successfully deleted employee with id: {employees[0].id}"
    assert len(store.list_all()) == 2
