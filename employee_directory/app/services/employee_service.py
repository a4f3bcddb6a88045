"""
Business logic for the employee facade.

``EmployeeService`` keeps no state of its own.  Every query fetches a
fresh copy of the data from the employee store; search, highest
salary and top earners are computed in memory over the full list.
This keeps the facade trivially consistent with the store at the cost
of one full fetch per request, which is fine for a directory of this
size.  A cache would need explicit invalidation on create and delete.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..core.errors import EmployeeNotFoundError, UpstreamContractError, UpstreamError
from ..core.validation import validate_employee_id, validate_employee_input
from ..schemas.employee import Employee, EmployeeInput
from .deletion import EmployeeDeletion
from .upstream_client import EmployeeStoreClient


logger = logging.getLogger(__name__)

TOP_EARNERS_LIMIT = 10


def _to_employee(record: Dict[str, Any]) -> Employee:
    try:
        return Employee.from_store_record(record)
    except (KeyError, ValidationError) as exc:
        raise UpstreamContractError(f"Employee store returned a malformed record: {exc}") from exc


class EmployeeService:
    """Queries and mutations over the employee store."""

    def __init__(self, client: EmployeeStoreClient) -> None:
        self.client = client

    def _fetch_all(self) -> List[Employee]:
        """Fetch every employee, letting upstream errors propagate."""
        records = self.client.list_employees()
        if not records:
            logger.warning("Employee store returned no employees")
        return [_to_employee(record) for record in records]

    def list_all(self) -> List[Employee]:
        """Return all employees, or an empty list if the store is unavailable."""
        logger.info("Fetching all employees")
        try:
            return self._fetch_all()
        except UpstreamError as exc:
            logger.error("Could not fetch employees, returning empty list: %s", exc)
            return []

    def search_by_name(self, fragment: str) -> List[Employee]:
        """Return employees whose name contains ``fragment``, ignoring case."""
        logger.info("Searching employees with name containing: %s", fragment)
        needle = (fragment or "").lower()
        return [emp for emp in self._fetch_all() if needle in emp.name.lower()]

    def get_by_id(self, employee_id: Optional[str]) -> Optional[Employee]:
        """Return the employee with ``employee_id`` or ``None`` if it does not exist."""
        validate_employee_id(employee_id)
        logger.info("Fetching employee with id: %s", employee_id)
        try:
            records = self.client.get_employee(employee_id)
        except EmployeeNotFoundError:
            logger.info("Employee %s not found", employee_id)
            return None
        if not records:
            return None
        return _to_employee(records[0])

    def highest_salary(self) -> int:
        """Return the highest salary across all employees, 0 if there are none."""
        logger.info("Calculating highest salary")
        return max((emp.salary for emp in self._fetch_all()), default=0)

    def top_ten_highest_earners(self) -> List[str]:
        """Return the names of the ten best paid employees, best paid first."""
        logger.info("Fetching top %d highest earning employee names", TOP_EARNERS_LIMIT)
        # sorted() is stable, so equal salaries keep the store's order.
        ranked = sorted(self._fetch_all(), key=lambda emp: emp.salary, reverse=True)
        return [emp.name for emp in ranked[:TOP_EARNERS_LIMIT]]

    def create_employee(self, data: EmployeeInput) -> Optional[Employee]:
        """Validate ``data`` and create the employee in the store.

        Returns ``None`` when the store reports the collection as not
        found.  Raises ``UpstreamContractError`` when the store accepts
        the request but does not return the created record.
        """
        validate_employee_input(data)
        logger.info("Creating new employee %s", data.name)
        try:
            records = self.client.create_employee(data.model_dump())
        except EmployeeNotFoundError:
            logger.error("Employee store could not be found while creating %s", data.name)
            return None
        if not records:
            raise UpstreamContractError("Failed to create employee: Empty response")
        employee = _to_employee(records[0])
        logger.info("Created employee %s", employee.id)
        return employee

    def delete_by_id(self, employee_id: Optional[str]) -> str:
        """Delete the employee with ``employee_id`` and describe what happened."""
        logger.info("Deleting employee with id: %s", employee_id)
        return EmployeeDeletion(self.client, employee_id).run().message
