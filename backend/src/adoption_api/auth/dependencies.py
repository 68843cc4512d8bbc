"""FastAPI dependencies for authentication.

Handlers compose these explicitly:

    @router.get("/animals")
    def list_animals(claims: OptionalClaims, db: DbSession): ...

    @router.post("/animals")
    def create_animal(admin: CurrentAdmin, db: DbSession): ...

Token verification is delegated to ``claims.decode_claims`` /
``claims.authenticate``. The administrator row is reloaded on every request
so organization membership, organization activation and the super-admin
flag are never taken from a stale token.
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import AuthenticationError, AuthorizationError
from ..models.administrator import Administrator
from ..tenancy.policy import OperationClass, authorize
from .claims import Claims, authenticate, claims_for_administrator, decode_claims

# auto_error=False: missing credentials are reported with our own error envelope
bearer_scheme = HTTPBearer(auto_error=False)


def _token(credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    return credentials.credentials if credentials else None


def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Administrator:
    """Verify the bearer token and load the authenticated administrator.

    Raises:
        AuthenticationError 401: NO_TOKEN, TOKEN_EXPIRED, INVALID_TOKEN, or
            the administrator no longer exists
        AuthorizationError 403: ORGANIZATION_INACTIVE
    """
    claims = decode_claims(_token(credentials))

    admin = db.get(Administrator, claims.admin_id)
    if admin is None:
        raise AuthenticationError("Administrator not found", code="INVALID_TOKEN")

    if not admin.organizacion.activa:
        raise AuthorizationError(
            "Your organization is inactive. Contact the platform administrator.",
            code="ORGANIZATION_INACTIVE",
        )

    return admin


def get_current_claims(
    admin: Administrator = Depends(get_current_admin),
) -> Claims:
    return claims_for_administrator(admin)


def get_optional_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Optional[Claims]:
    """Claims for public endpoints.

    An absent or invalid token, or one whose organization was deactivated,
    means anonymous.
    """
    claims = authenticate(_token(credentials))
    if claims is None:
        return None

    admin = db.get(Administrator, claims.admin_id)
    if admin is None or not admin.organizacion.activa:
        return None

    return claims_for_administrator(admin)


def require_super_admin(
    claims: Claims = Depends(get_current_claims),
) -> Claims:
    """Allow only super-administrators (403 FORBIDDEN otherwise)."""
    authorize(claims, None, OperationClass.SUPER_ADMIN_ONLY)
    return claims


# Type aliases for cleaner endpoint signatures
CurrentAdmin = Annotated[Administrator, Depends(get_current_admin)]
CurrentClaims = Annotated[Claims, Depends(get_current_claims)]
OptionalClaims = Annotated[Optional[Claims], Depends(get_optional_claims)]
SuperAdminClaims = Annotated[Claims, Depends(require_super_admin)]
