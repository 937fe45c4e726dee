"""
Domain and I/O models.

- domain: enums and value objects used by entities and services
- io: Pydantic schemas defining the HTTP API contract
"""
