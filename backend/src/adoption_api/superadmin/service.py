"""Organization management for super-administrators."""

import logging
import re
import time
import unicodedata
from typing import List, Tuple

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from ..auth.password import hash_password
from ..dependencies import get_or_404
from ..errors import ConflictError
from ..models.administrator import Administrator
from ..models.animal import Animal
from ..models.organization import Organization
from .schemas import OrganizationCounts, OrganizationCreate

logger = logging.getLogger(__name__)

MAX_SLUG_LENGTH = 45


def slugify(name: str) -> str:
    """Lowercase URL slug: accents folded, [a-z0-9 -] kept, spaces -> '-'.

    >>> slugify("Refugio Ñandú Feliz")
    'refugio-nandu-feliz'
    """
    folded = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9\s-]", "", folded.lower())
    slug = re.sub(r"\s+", "-", slug.strip())
    slug = re.sub(r"-{2,}", "-", slug)
    return slug[:MAX_SLUG_LENGTH].strip("-") or "organizacion"


def unique_slug(db: Session, name: str) -> str:
    """Slug for ``name``; a 4-digit suffix is appended on collision."""
    base = slugify(name)
    slug = base
    suffix = int(str(int(time.time() * 1000))[-4:])
    while db.query(Organization.id).filter(Organization.slug == slug).first() is not None:
        slug = f"{base}-{suffix:04d}"
        suffix = (suffix + 1) % 10000
    return slug


def list_organizations(db: Session) -> List[Tuple[Organization, OrganizationCounts]]:
    """Every organization (active or not) with animal and admin counts."""
    animal_counts = dict(
        db.query(Animal.organizacion_id, func.count(Animal.id))
        .group_by(Animal.organizacion_id)
        .all()
    )
    admin_counts = dict(
        db.query(Administrator.organizacion_id, func.count(Administrator.id))
        .group_by(Administrator.organizacion_id)
        .all()
    )
    organizations = db.query(Organization).order_by(Organization.fecha_creacion.desc(), Organization.id.desc()).all()
    return [
        (
            org,
            OrganizationCounts(
                animales=animal_counts.get(org.id, 0),
                administradores=admin_counts.get(org.id, 0),
            ),
        )
        for org in organizations
    ]


def create_organization(db: Session, data: OrganizationCreate) -> Tuple[Organization, Administrator]:
    """Create an organization and its first administrator atomically.

    Raises:
        ConflictError: DUPLICATE_ERROR when the username or email is taken
    """
    admin_email = data.admin_email.lower()
    existing = (
        db.query(Administrator.id)
        .filter(or_(Administrator.username == data.admin_username, Administrator.email == admin_email))
        .first()
    )
    if existing is not None:
        raise ConflictError("Username or email already in use", code="DUPLICATE_ERROR")

    password_hash = hash_password(data.admin_password)

    organization = Organization(
        nombre=data.nombre,
        slug=unique_slug(db, data.nombre),
        email=data.email,
        telefono=data.telefono,
        whatsapp=data.whatsapp,
        direccion=data.direccion,
        descripcion=data.descripcion,
        activa=True,
    )
    try:
        db.add(organization)
        db.flush()

        admin = Administrator(
            organizacion_id=organization.id,
            username=data.admin_username,
            email=admin_email,
            password_hash=password_hash,
            es_super_admin=False,
        )
        db.add(admin)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(organization)
    db.refresh(admin)
    logger.info(
        f"Organization '{organization.slug}' created with administrator '{admin.username}'",
        extra={"org_id": organization.id, "admin_id": admin.id},
    )
    return organization, admin


def toggle_organization(db: Session, organization_id: int) -> Organization:
    organization = get_or_404(db, Organization, organization_id, "Organization not found")
    organization.activa = not organization.activa
    db.commit()
    db.refresh(organization)
    logger.info(
        f"Organization '{organization.slug}' {'activated' if organization.activa else 'deactivated'}",
        extra={"org_id": organization.id},
    )
    return organization
