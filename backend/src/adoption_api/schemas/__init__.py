"""Shared API schemas"""

from .common import Envelope, ErrorBody, ErrorResponse, MessageData, validate_url

__all__ = ["Envelope", "ErrorBody", "ErrorResponse", "MessageData", "validate_url"]
