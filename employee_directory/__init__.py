"""
Top-level package for the Employee Directory.

Two FastAPI applications live here:

* ``employee_directory.app`` - the public employee API (the facade).
* ``employee_directory.mock_server`` - the in-memory employee store the
  facade calls over HTTP.

The package provides no public exports; all functionality lives in
the two subpackages.
"""

__all__ = []
