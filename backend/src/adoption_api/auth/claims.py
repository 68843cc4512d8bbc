"""Verified caller identity.

``Claims`` is what the authorization policy reasons about. The functions
here are pure with respect to the request: they take a raw token and return
claims (or raise), never touching request state.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import jwt

from ..errors import AuthenticationError
from .jwt import decode_token


@dataclass(frozen=True)
class Claims:
    admin_id: int
    organization_id: int
    is_super_admin: bool = False
    email: Optional[str] = None
    username: Optional[str] = None


def claims_from_payload(payload: Dict[str, Any]) -> Claims:
    """Build Claims from a decoded token payload.

    Raises:
        ValueError: If required claims are missing or malformed
    """
    try:
        admin_id = int(payload["sub"])
        organization_id = int(payload["org_id"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Malformed token claims: {e}")

    return Claims(
        admin_id=admin_id,
        organization_id=organization_id,
        is_super_admin=bool(payload.get("super_admin", False)),
        email=payload.get("email"),
        username=payload.get("username"),
    )


def decode_claims(token: Optional[str]) -> Claims:
    """Verify a bearer token and return its claims.

    Raises:
        AuthenticationError: NO_TOKEN, TOKEN_EXPIRED or INVALID_TOKEN
    """
    if not token:
        raise AuthenticationError("Authentication token not provided", code="NO_TOKEN")

    try:
        return claims_from_payload(decode_token(token))
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired", code="TOKEN_EXPIRED")
    except (jwt.InvalidTokenError, ValueError):
        raise AuthenticationError("Invalid token", code="INVALID_TOKEN")


def authenticate(token: Optional[str]) -> Optional[Claims]:
    """Return claims for a valid token, None for a missing or invalid one."""
    try:
        return decode_claims(token)
    except AuthenticationError:
        return None


def claims_for_administrator(admin) -> Claims:
    """Current claims for an Administrator row (tenant and flag as stored now)."""
    return Claims(
        admin_id=admin.id,
        organization_id=admin.organizacion_id,
        is_super_admin=bool(admin.es_super_admin),
        email=admin.email,
        username=admin.username,
    )
