"""
Pydantic schema definitions for API payloads.

Schemas are separated from the stored record type to decouple the API
representation (camelCase field names) from persistence.
"""
