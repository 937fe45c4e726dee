"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for monitoring and
tracing of the bakery backend, including:
- API endpoint tracing
- Database operation monitoring
- Request duration metrics
- Error tracking

The initialization is conditional on ``LOGFIRE_ENABLED``; when disabled every
``log_*`` helper is a cheap no-op so the request path never depends on Logfire.
"""

import logging
from typing import Optional

import logfire
from fastapi import FastAPI

from bakery_shop.server.core.config import LogfireConfig, settings

logger = logging.getLogger(__name__)

_logfire_configured = False


def is_logfire_configured() -> bool:
    """Whether ``initialize_logfire`` successfully configured Logfire."""
    return _logfire_configured


def initialize_logfire(app: FastAPI | None = None, config: Optional[LogfireConfig] = None) -> bool:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    This function sets up Logfire with automatic instrumentation for:
    - SQLAlchemy database operations
    - FastAPI endpoints

    Args:
        app: FastAPI application instance for FastAPI instrumentation (optional).
        config: Logfire configuration; defaults to the application settings.

    Returns:
        True if Logfire was configured.
    """
    global _logfire_configured

    config = config or settings.logfire
    if not config.enabled:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not config.token:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    try:
        logfire.configure(
            token=config.token,
            service_name=config.service_name,
            service_version=config.service_version,
            environment=config.environment,
        )
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False

    if config.trace_sqlalchemy:
        try:
            logfire.instrument_sqlalchemy()
            logger.info("Logfire: SQLAlchemy instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument SQLAlchemy: {e}")

    if config.trace_fastapi:
        if app is not None:
            try:
                logfire.instrument_fastapi(app=app)
                logger.info("Logfire: FastAPI instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument FastAPI: {e}")
        else:
            logger.debug("FastAPI app instance not provided, skipping FastAPI instrumentation")

    _logfire_configured = True
    logger.info(
        f"Logfire monitoring initialized: environment={config.environment}, service={config.service_name}"
    )
    return True


def _emit(level: str, message: str, **attributes) -> None:
    """Send one Logfire record; monitoring problems never reach the caller."""
    if not _logfire_configured:
        return
    try:
        getattr(logfire, level)(message, **attributes)
    except Exception:
        logger.debug(f"Could not send to Logfire: {message}")


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """Record a finished HTTP request and its duration in milliseconds."""
    _emit(
        "info",
        "API request completed",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
    )


def log_order_event(order_id: int, event: str, user_email: str, state: str) -> None:
    """
    Record an order lifecycle event.

    Args:
        order_id: The order identifier
        event: Short event name (saved, commented, state changed)
        user_email: Email of the staff member performing the change
        state: Order state after the event
    """
    _emit("info", "Order {event}", event=event, order_id=order_id, user_email=user_email, state=state)


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    _emit(
        "error",
        "{error_type}: {error_message}",
        error_type=error_type,
        error_message=error_message,
        **(context or {}),
    )
