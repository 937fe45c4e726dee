"""
Middleware modules for the bakery server.

This package contains custom middleware for request timing, request logging
and Logfire request metrics.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
