"""
HTTP client for the employee store.

The employee store wraps every payload in an envelope of the form
``{"data": ..., "status": ..., "statusCode": ..., "error": ...}``.
``data`` may be a single record, a list of records, a scalar or
missing altogether.  ``EmployeeStoreClient`` hides the envelope from
the rest of the facade: record payloads always come back as a list of
dictionaries, and every failure is raised as one of the errors in
``core.errors``:

* HTTP 404 -> ``EmployeeNotFoundError`` (``UpstreamTransportError`` when
  listing, since then the collection itself is missing)
* HTTP 429 -> ``RateLimitedError`` (with the ``Retry-After`` value)
* other non-2xx statuses, timeouts and connection errors ->
  ``UpstreamTransportError``
* a body that is not a JSON envelope -> ``UpstreamContractError``

The client uses the ``requests`` library.  Any object with a
compatible ``request`` method can be passed as ``session``; tests pass
a FastAPI ``TestClient`` bound to the mock store.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests
from requests.utils import quote

from ..core.errors import (
    EmployeeNotFoundError,
    RateLimitedError,
    UpstreamContractError,
    UpstreamTransportError,
)


logger = logging.getLogger(__name__)


class EmployeeStoreClient:
    """Client for the employee collection exposed by the employee store."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[Any] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: URL of the employee collection, e.g.
                ``http://localhost:8112/api/v1/employee``.
            timeout: Seconds to wait for each request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str = "", *, json_body: Any | None = None) -> Any:
        """Perform an HTTP request and return the envelope's ``data``.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/1234``).
            json_body: JSON body to send with the request.
        Returns:
            The ``data`` member of the response envelope, or ``None``
            when the response carries no body or no ``data``.
        """
        url = f"{self.base_url}{path}"
        kwargs: Dict[str, Any] = {"json": json_body}
        # Starlette's TestClient deprecates per-request timeouts.
        if isinstance(self.session, requests.Session):
            kwargs["timeout"] = self.timeout
        logger.debug("Sending %s request to %s", method, url)
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.error("Employee store request failed: %s", exc)
            raise UpstreamTransportError(str(exc)) from exc

        status = response.status_code
        if status == 404:
            raise EmployeeNotFoundError(f"Employee store returned 404 for {method} {url}")
        if status == 429:
            retry_after = response.headers.get("Retry-After")
            message = "Rate limit exceeded (HTTP 429) for employee store."
            if retry_after:
                message += f" Please try again after {retry_after} seconds."
            logger.warning(message)
            raise RateLimitedError(message, retry_after=retry_after)
        if status < 200 or status >= 300:
            message = self._error_message(response)
            logger.error("Employee store request failed (%s): %s", status, message)
            raise UpstreamTransportError(
                f"Employee store returned HTTP {status}: {message}",
                status_code=status,
            )

        if not response.content:
            return None
        try:
            envelope = response.json()
        except ValueError as exc:
            raise UpstreamContractError(
                f"Employee store returned a body that is not JSON: {exc}",
                status_code=status,
            ) from exc
        if not isinstance(envelope, dict):
            raise UpstreamContractError(
                "Employee store returned a body that is not an envelope",
                status_code=status,
            )
        return envelope.get("data")

    @staticmethod
    def _error_message(response: Any) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            return str(body.get("error") or body.get("detail") or body.get("status") or body)
        return str(body)

    @staticmethod
    def _as_records(data: Any) -> List[Dict[str, Any]]:
        """Normalise an envelope payload to a list of record dictionaries."""
        if data is None:
            return []
        if isinstance(data, dict):
            return [data]
        if isinstance(data, list):
            records = [item for item in data if isinstance(item, dict)]
            if len(records) != len(data):
                raise UpstreamContractError("Employee store returned a list with non-record items")
            return records
        raise UpstreamContractError(
            f"Employee store returned {type(data).__name__} where records were expected"
        )

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def list_employees(self) -> List[Dict[str, Any]]:
        """Return every record held by the store.

        A 404 here means the collection itself is missing (usually a
        wrong ``EMPLOYEE_STORE_URL``), so it is raised as a transport
        failure rather than ``EmployeeNotFoundError``.
        """
        try:
            data = self._request("GET")
        except EmployeeNotFoundError as exc:
            logger.error("Employee collection not found at %s", self.base_url)
            raise UpstreamTransportError(
                f"Employee store has no employee collection at {self.base_url}",
                status_code=404,
            ) from exc
        return self._as_records(data)

    def get_employee(self, employee_id: str) -> List[Dict[str, Any]]:
        """Return the record with ``employee_id`` as a zero or one item list.

        Raises ``EmployeeNotFoundError`` when the store answers 404.
        """
        return self._as_records(self._request("GET", "/" + quote(employee_id, safe="")))

    def create_employee(self, payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Create a record and return the store's answer as a list."""
        return self._as_records(self._request("POST", json_body=payload))

    def delete_employee_by_name(self, name: str) -> Any:
        """Ask the store to remove the first employee called ``name``.

        Returns the raw ``data`` value; the store answers ``true`` when a
        record was removed.
        """
        return self._request("DELETE", json_body={"name": name})
