"""
Bakery Shop Server Package.

This package contains the web server implementation for the bakery-shop backend.
It includes the API definition, service layer, configuration and middleware.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and static constants.
    services: CrudService hierarchy with the business rules.
    middleware: Request tracing middleware.
    exception_handlers: Mapping of domain errors to HTTP responses.
"""
