"""Pytest fixtures shared by unit, integration and security tests.

Provides:
- An in-memory SQLite database (foreign keys enforced) per test
- Two active organizations with one administrator each, a platform
  organization with a super-administrator, and an inactive organization
- An application built with ``create_app`` and in-process substitutes for
  image storage and outbound email
- Token helpers and factories for animals and adoption requests

Usage:
    def test_owner_sees_adopted_animal(client, auth_headers, admin_a, make_animal, org_a):
        animal = make_animal(org_a, estado=AnimalStatus.ADOPTED)
        response = client.get(f"/api/animals/{animal.id}", headers=auth_headers(admin_a))
        assert response.status_code == 200
"""

import os

# Set environment variables BEFORE any application imports
os.environ["ENVIRONMENT"] = "test"
os.environ["JWT_SECRET"] = "test-jwt-secret-key-256-bits-minimum-length-required-for-security"
os.environ["PASSWORD_PEPPER"] = "test-pepper-secret-key-32-chars-long"
os.environ["LOG_JSON"] = "false"
os.environ.pop("SMTP_HOST", None)

from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from adoption_api.auth.jwt import create_access_token
from adoption_api.auth.password import hash_password
from adoption_api.config import Settings, get_settings
from adoption_api.database import Database
from adoption_api.main import create_app
from adoption_api.models import Administrator, AdoptionRequest, Animal, Organization
from adoption_api.models.enums import AnimalStatus, HousingType, Sex, Size, Species
from adoption_api.notifications.dispatcher import NotificationDispatcher
from adoption_api.uploads.ports import ImageStoragePort, StorageError, StoredImage

get_settings.cache_clear()

TEST_PASSWORD = "Secreta123"
FALLBACK_RECIPIENT = "plataforma@adopcion.org"


class FakeImageStorage(ImageStoragePort):
    """In-memory image host."""

    def __init__(self, fail: bool = False):
        self.objects: Dict[str, bytes] = {}
        self.fail = fail
        self._counter = 0

    async def store_image(self, data: bytes, content_type: str, filename: str) -> StoredImage:
        if self.fail:
            raise StorageError("storage offline")
        self._counter += 1
        key = f"adopcion/img{self._counter}.png"
        self.objects[key] = data
        return StoredImage(
            url=f"https://cdn.example.com/{key}",
            public_id=key,
            size_bytes=len(data),
            content_type=content_type,
        )

    async def delete_image(self, public_id: str) -> bool:
        if self.fail:
            raise StorageError("storage offline")
        return self.objects.pop(public_id, None) is not None

    async def image_exists(self, public_id: str) -> bool:
        return public_id in self.objects


class FakeEmailClient:
    """Records messages instead of talking to an SMTP server."""

    def __init__(self, fail: bool = False):
        self.sent: List[dict] = []
        self.fail = fail

    def send(self, sender, recipients, subject, text_body, html_body=None, reply_to=None):
        if self.fail:
            raise ConnectionRefusedError("SMTP server unreachable")
        self.sent.append({
            "sender": sender,
            "recipients": list(recipients),
            "subject": subject,
            "text_body": text_body,
            "html_body": html_body,
            "reply_to": reply_to,
        })


@pytest.fixture(scope="session")
def password_hash() -> str:
    """Argon2id is deliberately slow; hash the shared test password once."""
    return hash_password(TEST_PASSWORD)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ENVIRONMENT="test",
        DATABASE_URL="sqlite:///:memory:",
        LOG_JSON=False,
        SMTP_HOST=None,
        ADMIN_EMAIL=FALLBACK_RECIPIENT,
        UPLOAD_MAX_BYTES=1024,
    )


@pytest.fixture
def database():
    database = Database("sqlite:///:memory:")
    database.create_all()
    yield database
    database.drop_all()
    database.dispose()


@pytest.fixture
def db_session(database):
    session = database.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def image_storage() -> FakeImageStorage:
    return FakeImageStorage()


@pytest.fixture
def email_client() -> FakeEmailClient:
    return FakeEmailClient()


@pytest.fixture
def notifier(email_client) -> NotificationDispatcher:
    return NotificationDispatcher(
        email_client=email_client,
        sender="no-reply@adopcion.org",
        fallback_recipient=FALLBACK_RECIPIENT,
        dashboard_url="http://localhost:5173/admin/solicitudes",
    )


@pytest.fixture
def app(settings, database, notifier, image_storage):
    return create_app(
        settings=settings,
        database=database,
        notifier=notifier,
        image_storage=image_storage,
        configure_logs=False,
    )


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def _organization(db_session, slug: str, nombre: str, activa: bool = True, **fields) -> Organization:
    org = Organization(slug=slug, nombre=nombre, activa=activa, **fields)
    db_session.add(org)
    db_session.commit()
    db_session.refresh(org)
    return org


def _administrator(db_session, org, username, email, password_hash, es_super_admin=False) -> Administrator:
    admin = Administrator(
        organizacion_id=org.id,
        username=username,
        email=email,
        password_hash=password_hash,
        es_super_admin=es_super_admin,
    )
    db_session.add(admin)
    db_session.commit()
    db_session.refresh(admin)
    return admin


@pytest.fixture
def org_a(db_session) -> Organization:
    return _organization(
        db_session,
        "refugio-patitas",
        "Refugio Patitas Felices",
        email="contacto@patitas.org",
        donacion_cbu="0000003100012345678901",
    )


@pytest.fixture
def org_b(db_session) -> Organization:
    return _organization(db_session, "huellitas-amor", "Huellitas de Amor")


@pytest.fixture
def platform_org(db_session) -> Organization:
    return _organization(db_session, "plataforma", "Plataforma Adopción")


@pytest.fixture
def inactive_org(db_session) -> Organization:
    return _organization(db_session, "refugio-cerrado", "Refugio Cerrado", activa=False)


@pytest.fixture
def admin_a(db_session, org_a, password_hash) -> Administrator:
    return _administrator(db_session, org_a, "admin_a", "admin@patitas.org", password_hash)


@pytest.fixture
def admin_b(db_session, org_b, password_hash) -> Administrator:
    return _administrator(db_session, org_b, "admin_b", "admin@huellitas.org", password_hash)


@pytest.fixture
def super_admin(db_session, platform_org, password_hash) -> Administrator:
    return _administrator(
        db_session, platform_org, "root", "root@plataforma.org", password_hash, es_super_admin=True
    )


@pytest.fixture
def inactive_admin(db_session, inactive_org, password_hash) -> Administrator:
    return _administrator(db_session, inactive_org, "admin_cerrado", "admin@cerrado.org", password_hash)


def token_for(admin: Administrator) -> str:
    return create_access_token(
        admin_id=admin.id,
        org_id=admin.organizacion_id,
        email=admin.email,
        username=admin.username,
        super_admin=admin.es_super_admin,
    )


@pytest.fixture
def auth_headers():
    def _headers(admin: Administrator) -> Dict[str, str]:
        return {"Authorization": f"Bearer {token_for(admin)}"}
    return _headers


def animal_payload(**overrides) -> dict:
    """Valid body for POST /api/animals."""
    payload = {
        "nombre": "Luna",
        "especie": Species.DOG.value,
        "sexo": Sex.FEMALE.value,
        "edad_aproximada": "2 años",
        "tamanio": Size.LARGE.value,
        "descripcion_historia": "Rescatada de la calle cuando era cachorra, muy cariñosa y juguetona.",
        "estado_castracion": True,
        "estado_vacunacion": "Al día",
        "estado_desparasitacion": True,
        "socializa_perros": True,
        "foto_principal": "https://cdn.example.com/adopcion/luna.jpg",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_animal(db_session):
    def _make(org: Organization, estado: AnimalStatus = AnimalStatus.AVAILABLE, **overrides) -> Animal:
        fields = {
            "nombre": "Luna",
            "especie": Species.DOG,
            "sexo": Sex.FEMALE,
            "edad_aproximada": "2 años",
            "tamanio": Size.LARGE,
            "descripcion_historia": "Rescatada de la calle cuando era cachorra, muy cariñosa y juguetona.",
            "estado_castracion": True,
            "estado_vacunacion": "Al día",
            "estado_desparasitacion": True,
            "foto_principal": "https://cdn.example.com/adopcion/luna.jpg",
        }
        fields.update(overrides)
        animal = Animal(organizacion_id=org.id, estado=estado, **fields)
        db_session.add(animal)
        db_session.commit()
        db_session.refresh(animal)
        return animal
    return _make


def adoption_payload(animal_id: int, **overrides) -> dict:
    """Valid body for POST /api/adoption-requests."""
    payload = {
        "animal_id": animal_id,
        "nombre_completo": "María González",
        "edad": 30,
        "email": "maria@example.com",
        "telefono_whatsapp": "1155556666",
        "ciudad_zona": "Palermo, CABA",
        "tipo_vivienda": HousingType.APARTMENT.value,
        "vive_solo_acompanado": "Con mi pareja",
        "todos_de_acuerdo": True,
        "tiene_otros_animales": False,
        "experiencia_previa": "Tuve perros toda mi infancia",
        "puede_cubrir_gastos": True,
        "motivacion": "Quiero darle un hogar con mucho amor y paseos diarios.",
        "compromiso_castracion": True,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_request(db_session):
    def _make(animal: Animal, **overrides) -> AdoptionRequest:
        fields = adoption_payload(animal.id)
        fields["tipo_vivienda"] = HousingType(fields["tipo_vivienda"])
        fields.update(overrides)
        request = AdoptionRequest(**fields)
        db_session.add(request)
        db_session.commit()
        db_session.refresh(request)
        return request
    return _make


@pytest.fixture
def animal_form():
    return animal_payload


@pytest.fixture
def adoption_form():
    return adoption_payload
