"""
Main entrypoint for the Employee Directory API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn, e.g.::

    uvicorn employee_directory.app.main:app --port 8111

The API stores nothing itself; it needs the employee store (see
``employee_directory.mock_server``) reachable at
``settings.employee_store_url``.
"""

from typing import Optional

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.employee_service import EmployeeService
from .services.upstream_client import EmployeeStoreClient


def create_app(client: Optional[EmployeeStoreClient] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    client : Optional[EmployeeStoreClient]
        Client used to reach the employee store.  When omitted one is
        built from ``settings``.  Tests pass a client bound to an
        in-process store.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    if client is None:
        client = EmployeeStoreClient(
            base_url=settings.employee_store_url,
            timeout=settings.employee_store_timeout,
        )
    app.state.employee_service = EmployeeService(client)

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
