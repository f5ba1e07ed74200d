"""
Shared logging configuration for the FoodBuddy access gateway.
"""

import sys
import structlog
import logging
import os
import uuid
import time
from datetime import date
from typing import Any, Dict, Optional
from contextvars import ContextVar

# Context variables for correlation IDs
request_id_var: ContextVar[Optional[str]] = ContextVar('request_id', default=None)
entity_id_var: ContextVar[Optional[str]] = ContextVar('entity_id', default=None)
role_var: ContextVar[Optional[str]] = ContextVar('role', default=None)

_service_fields: Dict[str, str] = {}


def configure_logging(
    service_name: str,
    log_level: str = "info",
    *,
    version: str = "1.0",
    env: str = "local",
    log_dir: Optional[str] = None,
) -> None:
    """Configure structured logging for a service.

    Records are rendered as JSON on stdout. When ``log_dir`` is given they are
    also appended to ``<log_dir>/api_<YYYY-MM-DD>.log``.
    """
    _service_fields.clear()
    _service_fields.update({"service": service_name, "version": version, "env": env})

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_service_context,
            add_correlation_context,
            add_timestamp,
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, f"api_{date.today().isoformat()}.log")
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
        handlers=handlers,
        force=True,
    )


def add_service_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add service, version and environment to log events."""
    for key, value in _service_fields.items():
        event_dict.setdefault(key, value)
    return event_dict


def add_correlation_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add correlation context to log events."""
    request_id = request_id_var.get()
    if request_id:
        event_dict["request_id"] = request_id

    entity_id = entity_id_var.get()
    if entity_id:
        event_dict["entity_id"] = entity_id

    role = role_var.get()
    if role:
        event_dict["role"] = role

    return event_dict


def add_timestamp(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add high-precision timestamp to log events."""
    event_dict["timestamp"] = time.time()
    return event_dict


def set_request_id(request_id: Optional[str] = None) -> str:
    """Set request ID in context."""
    if request_id is None:
        request_id = str(uuid.uuid4())
    request_id_var.set(request_id)
    return request_id


def set_identity_context(entity_id: Optional[str] = None, role: Optional[str] = None):
    """Set caller identity in logging."""
    if entity_id:
        entity_id_var.set(entity_id)
    if role:
        role_var.set(role)


def clear_context():
    """Clear all context variables."""
    request_id_var.set(None)
    entity_id_var.set(None)
    role_var.set(None)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
