"""Versioned routes of the mock employee store."""
