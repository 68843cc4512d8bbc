"""Observability: structured logging, request correlation, metrics and health."""

from .logging_config import configure_logging, get_logger
from .middleware import RequestIDMiddleware
from .request_id import generate_request_id, get_request_id, request_id_var, set_request_id

__all__ = [
    "configure_logging",
    "get_logger",
    "RequestIDMiddleware",
    "generate_request_id",
    "get_request_id",
    "request_id_var",
    "set_request_id",
]
