"""
Main entrypoint for the mock employee store.

The store keeps employee records in memory and serves them over HTTP
wrapped in an envelope.  ``create_app`` builds the application around
an ``EmployeeStore``; the module-level ``app`` is seeded with fake
employees so it is useful straight away::

    uvicorn employee_directory.mock_server.main:app --port 8112
"""

from typing import Optional

from fastapi import FastAPI

from employee_directory.app.core.config import settings
from employee_directory.app.core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.employee_store import EmployeeStore
from .services.rate_limiter import SlidingWindowRateLimiter


def create_app(
    store: Optional[EmployeeStore] = None,
    rate_limiter: Optional[SlidingWindowRateLimiter] = None,
) -> FastAPI:
    """Create and configure the mock store application.

    Parameters
    ----------
    store : Optional[EmployeeStore]
        Store to serve.  When omitted a new store is created and seeded
        with ``settings.mock_seed_size`` fake employees.
    rate_limiter : Optional[SlidingWindowRateLimiter]
        Limiter applied to every route.  When omitted one is built from
        ``settings.mock_rate_limit_requests`` and
        ``settings.mock_rate_limit_window``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.mock_server_name, version=settings.api_version)

    if store is None:
        store = EmployeeStore()
        store.seed(settings.mock_seed_size)
    if rate_limiter is None:
        rate_limiter = SlidingWindowRateLimiter(
            settings.mock_rate_limit_requests,
            settings.mock_rate_limit_window,
        )
    app.state.store = store
    app.state.rate_limiter = rate_limiter

    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()
