"""Endpoint modules of the mock employee store, aggregated in ``router.py``."""
