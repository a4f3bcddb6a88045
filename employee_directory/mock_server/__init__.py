"""
Mock employee store.

An in-memory HTTP service holding the employee records that the
Employee Directory API reads and mutates.  It stands in for a real
HR backend during development and tests.
"""

from .main import app  # noqa: F401
