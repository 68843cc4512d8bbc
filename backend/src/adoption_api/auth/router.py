"""Authentication endpoints: login, logout and current administrator."""

import logging

from fastapi import APIRouter

from ..dependencies import DbSession
from ..errors import AuthenticationError, AuthorizationError
from ..models.administrator import Administrator
from ..models.base import utcnow
from ..observability.metrics import login_attempts_total
from ..schemas.common import Envelope, MessageData
from .dependencies import CurrentAdmin
from .jwt import create_access_token, get_jwt_expiry_minutes
from .password import verify_password
from .schemas import AdminSummary, LoginData, LoginRequest, MeData, OrganizationRef

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=Envelope[LoginData])
def login(credentials: LoginRequest, db: DbSession):
    """Authenticate an administrator by email and password.

    - Unknown email and wrong password get the same 401 INVALID_CREDENTIALS
    - A correct password for an inactive organization gets 403
      ORGANIZATION_INACTIVE and no token
    - ultimo_acceso is updated on success

    Raises:
        AuthenticationError 401: INVALID_CREDENTIALS
        AuthorizationError 403: ORGANIZATION_INACTIVE
    """
    admin = (
        db.query(Administrator)
        .filter(Administrator.email == credentials.email.lower())
        .first()
    )

    if not admin or not verify_password(credentials.password, admin.password_hash):
        login_attempts_total.labels(result="invalid_credentials").inc()
        logger.info("Login failed: invalid credentials")
        raise AuthenticationError("Invalid email or password", code="INVALID_CREDENTIALS")

    organization = admin.organizacion
    if not organization.activa:
        login_attempts_total.labels(result="organization_inactive").inc()
        logger.info(
            "Login refused: organization inactive",
            extra={"org_id": organization.id, "admin_id": admin.id},
        )
        raise AuthorizationError(
            "Your organization is inactive. Contact the platform administrator.",
            code="ORGANIZATION_INACTIVE",
        )

    admin.ultimo_acceso = utcnow()
    db.commit()
    db.refresh(admin)

    token = create_access_token(
        admin_id=admin.id,
        org_id=admin.organizacion_id,
        email=admin.email,
        username=admin.username,
        super_admin=admin.es_super_admin,
    )

    login_attempts_total.labels(result="success").inc()
    logger.info(
        "Administrator logged in",
        extra={"org_id": admin.organizacion_id, "admin_id": admin.id},
    )

    return Envelope(
        data=LoginData(
            token=token,
            expires_in=get_jwt_expiry_minutes() * 60,
            admin=AdminSummary.model_validate(admin),
            organizacion=OrganizationRef.model_validate(organization),
        ),
        message="Login successful",
    )


@router.post("/logout", response_model=Envelope[MessageData])
def logout(admin: CurrentAdmin):
    """Acknowledge logout. Tokens are stateless; the client discards its copy."""
    logger.info("Administrator logged out", extra={"admin_id": admin.id})
    return Envelope(data=MessageData(message="Logged out"))


@router.get("/me", response_model=Envelope[MeData])
def get_me(admin: CurrentAdmin):
    return Envelope(data=MeData.model_validate(admin))
