"""Response envelope shared by every endpoint.

Success:  {"success": true, "data": {...}, "message": "..."}
Failure:  {"success": false, "error": {"code": "...", "message": "...", "details": [...]}}
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    success: bool = True
    data: DataT
    message: Optional[str] = None


class ErrorBody(BaseModel):
    code: str
    message: str
    details: Optional[List[Dict[str, Any]]] = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: ErrorBody


class MessageData(BaseModel):
    message: str


def validate_url(value: Optional[str]) -> Optional[str]:
    """Accept only absolute http(s) URLs; empty strings become None."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if not value.startswith(("http://", "https://")):
        raise ValueError("Must be a valid http(s) URL")
    return value
