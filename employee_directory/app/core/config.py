"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so both
services start without any configuration; override them via
environment variables in a real deployment.

The facade API and the mock employee store share one settings object.
Fields prefixed with ``mock_`` only affect the mock store.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Employee Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8111"))

    # Base URL of the employee collection on the upstream store.  All
    # facade calls are built relative to this URL, e.g. ``{url}/{id}``.
    employee_store_url: str = os.getenv(
        "EMPLOYEE_STORE_URL", "http://localhost:8112/api/v1/employee"
    )
    # Seconds to wait for the upstream store before giving up.
    employee_store_timeout: float = float(os.getenv("EMPLOYEE_STORE_TIMEOUT", "15"))

    mock_server_name: str = os.getenv("MOCK_SERVER_NAME", "Mock Employee Store")
    mock_server_host: str = os.getenv("MOCK_SERVER_HOST", "0.0.0.0")
    mock_server_port: int = int(os.getenv("MOCK_SERVER_PORT", "8112"))
    # Number of fake employees created when the mock store starts.
    mock_seed_size: int = int(os.getenv("MOCK_SEED_SIZE", "50"))

    # Requests allowed per window before the mock store answers 429.
    # Zero (the default) disables rate limiting entirely.
    mock_rate_limit_requests: int = int(os.getenv("MOCK_RATE_LIMIT_REQUESTS", "0"))
    mock_rate_limit_window: float = float(os.getenv("MOCK_RATE_LIMIT_WINDOW", "60"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
