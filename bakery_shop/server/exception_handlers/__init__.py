"""
Exception handlers for the bakery server.

This package maps the service layer's domain errors to HTTP responses and
installs a catch-all handler that logs unexpected failures with an error ID.
"""

from .domain_handlers import (
    access_denied_handler,
    entity_not_found_handler,
    user_friendly_data_error_handler,
)
from .global_handler import global_exception_handler, setup_exception_handlers

__all__ = [
    "access_denied_handler",
    "entity_not_found_handler",
    "global_exception_handler",
    "setup_exception_handlers",
    "user_friendly_data_error_handler",
]
