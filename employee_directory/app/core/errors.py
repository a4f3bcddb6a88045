"""
Error types shared by the facade API and the mock employee store.

Every error raised on purpose by this package derives from
``EmployeeDirectoryError``.  Endpoints translate them into HTTP
responses; services only raise them.

``UpstreamError`` and its subclasses describe problems talking to the
employee store: the store rate limited us, the call failed in transit
or returned a non-2xx status, or it answered with a payload that
breaks the expected contract.
"""

from typing import Optional


class EmployeeDirectoryError(Exception):
    """Base class for all employee directory errors."""


class EmployeeValidationError(EmployeeDirectoryError):
    """Input was rejected before reaching the employee store."""


class EmployeeNotFoundError(EmployeeDirectoryError):
    """The requested employee does not exist."""


class UpstreamError(EmployeeDirectoryError):
    """The employee store could not serve a request."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitedError(UpstreamError):
    """The employee store answered with HTTP 429.

    ``retry_after`` holds the value of the ``Retry-After`` header, if
    the store sent one.
    """

    def __init__(self, message: str, retry_after: Optional[str] = None) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class UpstreamTransportError(UpstreamError):
    """Network failure, timeout or unexpected HTTP status from the store."""


class UpstreamContractError(UpstreamError):
    """The store succeeded but its payload does not have the expected shape."""
