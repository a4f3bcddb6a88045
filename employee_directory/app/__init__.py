"""
Employee Directory API package.

The API keeps no data of its own.  Requests are validated here,
forwarded to the employee store over HTTP and the answers reshaped
into the API's flat ``employee_*`` format.  Routes live in
``api/v1/endpoints``, business logic in ``services``.
"""

from .main import app  # noqa: F401
