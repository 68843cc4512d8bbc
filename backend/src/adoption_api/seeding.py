"""Idempotent seed operations used by the setup scripts.

Upserts look rows up by their natural key (organization slug,
administrator email). An existing row is returned unchanged, so running a
seed twice never duplicates or overwrites data.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from .auth.password import hash_password
from .errors import NotFoundError
from .models.administrator import Administrator
from .models.animal import Animal
from .models.enums import AnimalStatus, Sex, Size, Species
from .models.organization import Organization

logger = logging.getLogger(__name__)

DEMO_ADMIN_EMAIL = "admin@adopcion.com"
DEMO_ADMIN_USERNAME = "admin"

DEMO_ORGANIZATIONS: List[Dict[str, Any]] = [
    {
        "slug": "refugio-patitas",
        "nombre": "Refugio Patitas Felices",
        "email": "contacto@patitasfelices.org",
        "telefono": "11-4567-8900",
        "direccion": "Av. San Martín 1234, Buenos Aires",
        "descripcion": "Refugio dedicado al rescate y adopción de perros y gatos abandonados.",
    },
    {
        "slug": "huellitas-amor",
        "nombre": "Huellitas de Amor",
        "email": "info@huellitasdeamor.org",
        "telefono": "11-2345-6789",
        "direccion": "Calle Belgrano 567, Córdoba",
        "descripcion": "ONG dedicada a encontrar hogares para animales rescatados.",
    },
]

DEMO_ANIMALS: List[Dict[str, Any]] = [
    {
        "nombre": "Luna",
        "especie": Species.DOG,
        "sexo": Sex.FEMALE,
        "edad_aproximada": "2 años",
        "tamanio": Size.LARGE,
        "raza_mezcla": "Labrador Mix",
        "descripcion_historia": (
            "Luna fue rescatada de la calle cuando era cachorra. Es una perra muy "
            "cariñosa y juguetona. Le encanta correr y jugar con pelotas."
        ),
        "estado_castracion": True,
        "estado_vacunacion": "Al día - Antirrábica y Séxtuple",
        "estado_desparasitacion": True,
        "socializa_perros": True,
        "socializa_gatos": False,
        "socializa_ninos": True,
        "tipo_hogar_ideal": "Casa con patio o departamento grande con paseos diarios",
        "foto_principal": "https://images.unsplash.com/photo-1552053831-71594a27632d?w=400",
    },
    {
        "nombre": "Michi",
        "especie": Species.CAT,
        "sexo": Sex.MALE,
        "edad_aproximada": "1 año",
        "tamanio": Size.MEDIUM,
        "raza_mezcla": "Común Europeo",
        "descripcion_historia": (
            "Michi fue encontrado abandonado en una caja. Es un gato tranquilo y muy "
            "independiente. Le gusta tomar sol en la ventana y ronronear."
        ),
        "estado_castracion": True,
        "estado_vacunacion": "Al día - Triple felina",
        "estado_desparasitacion": True,
        "socializa_perros": False,
        "socializa_gatos": True,
        "socializa_ninos": True,
        "tipo_hogar_ideal": "Departamento o casa, ideal sin perros",
        "foto_principal": "https://images.unsplash.com/photo-1514888286974-6c03e2ca1dba?w=400",
    },
    {
        "nombre": "Rocky",
        "especie": Species.DOG,
        "sexo": Sex.MALE,
        "edad_aproximada": "4 años",
        "tamanio": Size.SMALL,
        "raza_mezcla": "Bulldog Francés",
        "descripcion_historia": (
            "Rocky fue entregado por su familia anterior por mudanza. Es un perro muy "
            "cariñoso que ama estar en compañía. Ideal para departamento."
        ),
        "estado_castracion": False,
        "estado_vacunacion": "Al día - Antirrábica y Séxtuple",
        "estado_desparasitacion": True,
        "socializa_perros": True,
        "socializa_gatos": True,
        "socializa_ninos": True,
        "necesidades_especiales": "Cuidado con el calor extremo por su condición braquicefálica",
        "tipo_hogar_ideal": "Departamento con aire acondicionado",
        "foto_principal": "https://images.unsplash.com/photo-1583511655857-d19b40a7a54e?w=400",
    },
]


def upsert_organization(db: Session, slug: str, **fields: Any) -> Tuple[Organization, bool]:
    """Return the organization with ``slug``, creating it if missing.

    Returns:
        (organization, created)
    """
    organization = db.query(Organization).filter(Organization.slug == slug).first()
    if organization is not None:
        return organization, False

    organization = Organization(slug=slug, **fields)
    db.add(organization)
    db.commit()
    db.refresh(organization)
    logger.info(f"Seeded organization '{slug}'", extra={"org_id": organization.id})
    return organization, True


def upsert_administrator(
    db: Session,
    email: str,
    username: str,
    password: str,
    organizacion_id: int,
    es_super_admin: bool = False,
) -> Tuple[Administrator, bool]:
    """Return the administrator with ``email``, creating it if missing.

    Returns:
        (administrator, created)
    """
    admin = db.query(Administrator).filter(Administrator.email == email.lower()).first()
    if admin is not None:
        return admin, False

    admin = Administrator(
        email=email,
        username=username,
        password_hash=hash_password(password),
        organizacion_id=organizacion_id,
        es_super_admin=es_super_admin,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info(f"Seeded administrator '{username}'", extra={"admin_id": admin.id})
    return admin, True


def seed_demo_data(db: Session, admin_password: str) -> Dict[str, Any]:
    """Seed two organizations, one administrator and three animals.

    Animals are only added to an organization that has none yet.
    """
    organizations = [upsert_organization(db, **data)[0] for data in DEMO_ORGANIZATIONS]
    primary = organizations[0]

    admin, admin_created = upsert_administrator(
        db,
        email=DEMO_ADMIN_EMAIL,
        username=DEMO_ADMIN_USERNAME,
        password=admin_password,
        organizacion_id=primary.id,
    )

    animals_created = 0
    has_animals = db.query(Animal.id).filter(Animal.organizacion_id == primary.id).first() is not None
    if not has_animals:
        for data in DEMO_ANIMALS:
            db.add(Animal(
                **data,
                estado=AnimalStatus.AVAILABLE,
                publicado_por=primary.nombre,
                contacto_rescatista=f"{primary.email} / {primary.telefono}",
                organizacion_id=primary.id,
                administrador_id=admin.id,
            ))
            animals_created += 1
        db.commit()

    return {
        "organizations": [org.slug for org in organizations],
        "admin_email": admin.email,
        "admin_created": admin_created,
        "animals_created": animals_created,
    }


def promote_super_admin(db: Session, email: str, enabled: bool = True) -> Administrator:
    """Set (or clear) the super-administrator flag for ``email``.

    Raises:
        NotFoundError: no administrator with that email
    """
    admin: Optional[Administrator] = (
        db.query(Administrator).filter(Administrator.email == email.lower()).first()
    )
    if admin is None:
        raise NotFoundError(f"No administrator with email {email}")

    admin.es_super_admin = enabled
    db.commit()
    db.refresh(admin)
    logger.info(
        f"Administrator '{admin.username}' super-admin={enabled}",
        extra={"admin_id": admin.id},
    )
    return admin
