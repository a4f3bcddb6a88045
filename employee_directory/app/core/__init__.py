"""Configuration, logging, errors and input validation shared by both services."""
