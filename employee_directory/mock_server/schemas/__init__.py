"""Pydantic schemas for the mock employee store's records and envelope."""
