"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the SQL in ``repositories`` so the API
representation does not depend on how rows are stored.
"""
