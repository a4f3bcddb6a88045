"""Shared fixtures.

The facade talks to a real mock store running in-process: the store
app is wrapped in a FastAPI ``TestClient`` and that client is handed
to ``EmployeeStoreClient`` as its session.
"""

import uuid

import pytest
from faker import Faker
from fastapi.testclient import TestClient

from employee_directory.app.main import create_app as create_api_app
from employee_directory.app.services.employee_service import EmployeeService
from employee_directory.app.services.upstream_client import EmployeeStoreClient
from employee_directory.mock_server.main import create_app as create_store_app
from employee_directory.mock_server.schemas.employee import MockEmployee
from employee_directory.mock_server.services.employee_store import EmployeeStore
from employee_directory.mock_server.services.rate_limiter import SlidingWindowRateLimiter

STORE_URL = "http://testserver/api/v1/employee"


def make_employee(name, salary, age=30, title="Engineer", employee_id=None):
    handle = name.lower().replace(" ", ".")
    return MockEmployee(
        id=employee_id or str(uuid.uuid4()),
        name=name,
        title=title,
        salary=salary,
        age=age,
        email=f"{handle}@company.com",
    )


@pytest.fixture
def employees():
    return [
        make_employee("John Doe", 75000, 30, "Software Engineer"),
        make_employee("Jane Smith", 85000, 35, "Senior Developer"),
        make_employee("Bob Johnson", 65000, 25, "Junior Developer"),
    ]


@pytest.fixture
def store(employees):
    faker = Faker()
    faker.seed_instance(1234)
    return EmployeeStore(employees, faker=faker)


@pytest.fixture
def rate_limiter():
    """Disabled by default; tests that need limiting build their own app."""
    return SlidingWindowRateLimiter(0, 60)


@pytest.fixture
def store_client(store, rate_limiter):
    return TestClient(create_store_app(store=store, rate_limiter=rate_limiter))


@pytest.fixture
def upstream(store_client):
    return EmployeeStoreClient(base_url=STORE_URL, session=store_client)


@pytest.fixture
def service(upstream):
    return EmployeeService(upstream)


@pytest.fixture
def api_client(upstream):
    return TestClient(create_api_app(client=upstream))


@pytest.fixture
def employee_factory():
    return make_employee
