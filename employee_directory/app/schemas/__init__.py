"""
Pydantic schema definitions for API payloads.

Schemas here describe the facade's public shapes; the employee store
defines its own in ``mock_server.schemas``.
"""
