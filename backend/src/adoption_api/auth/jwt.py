"""JWT session token generation and validation

Token Claims:
- sub: Administrator id (string, per RFC 7519)
- email, username: Administrator identity for display and logging
- org_id: Organization (tenant) id
- super_admin: Cross-tenant authority flag at issue time
- iat / exp: Issued-at and expiration (iat + JWT_EXPIRY_MINUTES)

Tokens are HS256-signed with JWT_SECRET. There are no refresh tokens; an
administrator logs in again after expiry. Authorization never trusts the
tenant claims alone: request dependencies reload the administrator row.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from ..config import get_settings


def _get_jwt_secret() -> str:
    secret = get_settings().JWT_SECRET
    if not secret:
        raise ValueError("JWT_SECRET is not configured")
    return secret


def get_jwt_expiry_minutes() -> int:
    return get_settings().JWT_EXPIRY_MINUTES


def create_access_token(
    admin_id: int,
    org_id: int,
    email: str,
    username: str,
    super_admin: bool = False,
) -> str:
    """Create a signed session token for an authenticated administrator.

    Args:
        admin_id: Administrator id
        org_id: Organization id the administrator belongs to
        email: Administrator email
        username: Administrator username
        super_admin: Whether the administrator has cross-tenant authority

    Returns:
        str: Signed JWT token
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)
    expiration = now + timedelta(minutes=get_jwt_expiry_minutes())

    payload = {
        'sub': str(admin_id),
        'org_id': org_id,
        'email': email,
        'username': username,
        'super_admin': bool(super_admin),
        'iat': int(now.timestamp()),
        'exp': int(expiration.timestamp())
    }

    return jwt.encode(payload, _get_jwt_secret(), algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Decode and validate a JWT token.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or tampered
    """
    settings = get_settings()
    return jwt.decode(
        token,
        _get_jwt_secret(),
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp", "iat"]},
    )
