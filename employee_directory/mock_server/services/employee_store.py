"""
In-memory employee store.

``EmployeeStore`` owns the list of employee records served by the mock
store.  One instance is created per application (see ``main.py``) and
handed to the route handlers through a dependency.  A single lock
guards the whole list; every method holds it for its full duration,
so reads never observe a half-applied create or delete.

Records are never updated in place: they are appended by ``create``
and removed by ``delete_by_name`` or ``delete_by_id``.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Iterable, List, Optional

from faker import Faker

from employee_directory.app.core.errors import EmployeeNotFoundError
from employee_directory.mock_server.schemas.employee import CreateMockEmployeeInput, MockEmployee


logger = logging.getLogger(__name__)

EMAIL_TEMPLATE = "{username}@company.com"


class EmployeeStore:
    """Thread-safe in-memory registry of employee records."""

    def __init__(
        self,
        employees: Optional[Iterable[MockEmployee]] = None,
        faker: Optional[Faker] = None,
    ) -> None:
        self._employees: List[MockEmployee] = list(employees or [])
        self._faker = faker or Faker()
        self._lock = threading.Lock()

    def list_all(self) -> List[MockEmployee]:
        """Return a copy of all records in insertion order."""
        with self._lock:
            return list(self._employees)

    def get_by_id(self, employee_id: str) -> MockEmployee:
        """Return the record with ``employee_id``.

        Raises ``EmployeeNotFoundError`` if no record has that id.
        """
        with self._lock:
            employee = self._find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(f"Employee not found with id: {employee_id}")
        logger.info("Found employee %s", employee.id)
        return employee

    def search_by_name_fragment(self, fragment: str) -> List[MockEmployee]:
        """Return records whose name contains ``fragment``, ignoring case."""
        needle = fragment.lower()
        with self._lock:
            return [emp for emp in self._employees if needle in emp.name.lower()]

    def highest_salary(self) -> int:
        """Return the highest salary, or 0 when the store is empty."""
        with self._lock:
            return max((emp.salary for emp in self._employees), default=0)

    def top_n_by_earnings(self, n: int = 10) -> List[str]:
        """Return up to ``n`` names ordered by salary, highest first.

        Equal salaries keep insertion order.
        """
        with self._lock:
            ranked = sorted(self._employees, key=lambda emp: emp.salary, reverse=True)
        return [emp.name for emp in ranked[:max(n, 0)]]

    def create(self, data: CreateMockEmployeeInput, username: Optional[str] = None) -> MockEmployee:
        """Append a new record built from ``data`` and return it.

        The id is a fresh UUID4.  The e-mail is derived from
        ``username``, or from a generated one when omitted.
        """
        handle = (username or self._faker.user_name()).lower()
        employee = MockEmployee(
            id=str(uuid.uuid4()),
            name=data.name,
            title=data.title,
            salary=data.salary,
            age=data.age,
            email=EMAIL_TEMPLATE.format(username=handle),
        )
        with self._lock:
            self._employees.append(employee)
        logger.debug("Added employee: %s", employee)
        return employee

    def delete_by_name(self, name: str) -> bool:
        """Remove the first record named ``name`` (ignoring case).

        Names are not unique.  When several records share the name only
        the first is removed; callers that need a specific record must
        resolve and check it themselves.
        """
        wanted = name.lower()
        with self._lock:
            matches = [emp for emp in self._employees if emp.name.lower() == wanted]
            if not matches:
                return False
            if len(matches) > 1:
                logger.warning(
                    "%d employees are named %r; removing the first one (%s)",
                    len(matches),
                    name,
                    matches[0].id,
                )
            self._employees.remove(matches[0])
        logger.debug("Removed employee: %s", matches[0])
        return True

    def delete_by_id(self, employee_id: str) -> bool:
        """Remove the record with ``employee_id``; return whether one was removed."""
        with self._lock:
            employee = self._find_by_id(employee_id)
            if employee is None:
                return False
            self._employees.remove(employee)
        logger.debug("Removed employee by id: %s", employee)
        return True

    def seed(self, count: int) -> List[MockEmployee]:
        """Create ``count`` employees filled with fake data."""
        created = []
        for _ in range(count):
            data = CreateMockEmployeeInput(
                name=self._faker.name(),
                title=self._faker.job(),
                salary=self._faker.random_int(min=30_000, max=250_000),
                age=self._faker.random_int(min=16, max=75),
            )
            created.append(self.create(data))
        logger.info("Seeded employee store with %d employees", count)
        return created

    def _find_by_id(self, employee_id: str) -> Optional[MockEmployee]:
        # Callers must hold self._lock.
        wanted = employee_id.lower()
        return next((emp for emp in self._employees if emp.id.lower() == wanted), None)
