"""
Delete-by-id protocol.

The employee store only deletes by name, and it removes the first
record whose name matches.  Deleting by id therefore means resolving
the id to a name first and refusing to go ahead when another record
shares that name, otherwise the store could remove the wrong one.

The protocol runs as a small state machine::

    VALIDATING -> FETCHING -> RESOLVING -> REJECTED_AMBIGUOUS
                                        -> NOT_FOUND
                                        -> DELETING -> SUCCESS
                                                    -> FAILED

Every terminal state carries a human readable message.  Only a blank
id raises; all other outcomes are reported through the message.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..core.errors import EmployeeNotFoundError, UpstreamError
from ..core.validation import validate_employee_id
from .upstream_client import EmployeeStoreClient


logger = logging.getLogger(__name__)


class DeletionState(enum.Enum):
    VALIDATING = "validating"
    FETCHING = "fetching"
    RESOLVING = "resolving"
    DELETING = "deleting"
    REJECTED_AMBIGUOUS = "rejected_ambiguous"
    NOT_FOUND = "not_found"
    SUCCESS = "success"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_STATES


_TERMINAL_STATES = {
    DeletionState.REJECTED_AMBIGUOUS,
    DeletionState.NOT_FOUND,
    DeletionState.SUCCESS,
    DeletionState.FAILED,
}


@dataclass(frozen=True)
class DeletionOutcome:
    """Terminal state reached by a deletion and the message for the caller."""

    state: DeletionState
    message: str


class EmployeeDeletion:
    """One run of the delete-by-id protocol for a single employee id."""

    def __init__(self, client: EmployeeStoreClient, employee_id: Optional[str]) -> None:
        self.client = client
        self.employee_id = employee_id
        self.state = DeletionState.VALIDATING
        self.message = ""
        self._employees: List[Dict[str, Any]] = []
        self._target: Optional[Dict[str, Any]] = None

    def run(self) -> DeletionOutcome:
        """Advance through the states until a terminal one is reached."""
        steps = {
            DeletionState.VALIDATING: self._validate,
            DeletionState.FETCHING: self._fetch,
            DeletionState.RESOLVING: self._resolve,
            DeletionState.DELETING: self._delete,
        }
        while not self.state.is_terminal:
            next_state = steps[self.state]()
            logger.debug("Deletion of %s: %s -> %s", self.employee_id, self.state.name, next_state.name)
            self.state = next_state
        logger.info("Deletion of %s finished in state %s", self.employee_id, self.state.name)
        return DeletionOutcome(state=self.state, message=self.message)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------
    def _validate(self) -> DeletionState:
        validate_employee_id(self.employee_id)
        return DeletionState.FETCHING

    def _fetch(self) -> DeletionState:
        try:
            self._employees = self.client.list_employees()
        except UpstreamError as exc:
            logger.error("Could not fetch employees to delete %s: %s", self.employee_id, exc)
            return self._finish(
                DeletionState.FAILED,
                f"Error deleting employee with id: {self.employee_id}. Error: {exc}",
            )
        if not self._employees:
            return self._finish(DeletionState.NOT_FOUND, "No employees found to delete.")
        return DeletionState.RESOLVING

    def _resolve(self) -> DeletionState:
        self._target = next(
            (emp for emp in self._employees if str(emp.get("id")) == self.employee_id),
            None,
        )
        if self._target is None:
            return self._finish(DeletionState.NOT_FOUND, f"Employee not found with id: {self.employee_id}")

        name = self._target.get("name") or ""
        # The store matches names case-insensitively, so collisions must too.
        same_name = [
            emp
            for emp in self._employees
            if str(emp.get("id")) != self.employee_id
            and (emp.get("name") or "").lower() == name.lower()
        ]
        if same_name:
            logger.warning(
                "Refusing to delete %s: %d other employee(s) named %r",
                self.employee_id,
                len(same_name),
                name,
            )
            return self._finish(
                DeletionState.REJECTED_AMBIGUOUS,
                f"Cannot delete employee with id: {self.employee_id}. Found {len(same_name)} "
                f"other employee(s) with the same name: {name}",
            )
        return DeletionState.DELETING

    def _delete(self) -> DeletionState:
        name = self._target["name"]
        try:
            deleted = self.client.delete_employee_by_name(name)
        except EmployeeNotFoundError:
            return self._finish(DeletionState.NOT_FOUND, f"Employee not found with id: {self.employee_id}")
        except UpstreamError as exc:
            logger.error("Error deleting employee with id %s: %s", self.employee_id, exc)
            return self._finish(
                DeletionState.FAILED,
                f"Error deleting employee with id: {self.employee_id}. Error: {exc}",
            )
        if deleted:
            return self._finish(DeletionState.SUCCESS, f"Successfully deleted employee with id: {self.employee_id}")
        return self._finish(DeletionState.FAILED, f"Failed to delete employee with id: {self.employee_id}")

    def _finish(self, state: DeletionState, message: str) -> DeletionState:
        self.message = message
        return state
