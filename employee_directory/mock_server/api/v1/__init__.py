"""Version 1 of the mock employee store API."""
