"""Version 1 of the Employee Directory API."""
