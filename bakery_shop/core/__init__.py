"""
Core utilities and configuration for Bakery Shop.

This package provides core functionality including logging configuration,
database setup, and domain/I-O models shared by the server.
"""

from bakery_shop.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
