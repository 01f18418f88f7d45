"""
Pydantic schema definitions for API payloads.

Schemas are separated from the storage layer so the JSON shape of a
response does not depend on table layout.
"""
