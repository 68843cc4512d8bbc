"""Unit tests for Organization and Administrator models

Tests cover:
- Slug validation (valid and invalid formats)
- Name validation
- Duplicate slug and email rejection
- Deletion restricted while dependents exist
"""

import pytest
from sqlalchemy.exc import IntegrityError

from adoption_api.models import Administrator, Organization

pytestmark = pytest.mark.unit


class TestOrganizationValidation:

    def test_create_with_minimal_data(self, db_session):
        org = Organization(nombre="Refugio Norte", slug="refugio-norte")
        db_session.add(org)
        db_session.commit()

        assert org.id is not None
        assert org.activa is True
        assert org.fecha_creacion is not None

    @pytest.mark.parametrize("slug", ["refugio-norte", "huellitas-2024", "abc"])
    def test_valid_slugs(self, slug):
        assert Organization(nombre="Refugio", slug=slug).slug == slug

    @pytest.mark.parametrize("slug", ["Refugio", "refugio norte", "refugio_norte", "ñandu", ""])
    def test_invalid_slugs(self, slug):
        with pytest.raises(ValueError):
            Organization(nombre="Refugio", slug=slug)

    def test_slug_length_limit(self):
        with pytest.raises(ValueError, match="50"):
            Organization(nombre="Refugio", slug="a" * 51)

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError):
            Organization(nombre="   ", slug="refugio")

    def test_name_is_stripped(self):
        assert Organization(nombre="  Refugio  ", slug="refugio").nombre == "Refugio"

    def test_duplicate_slug_rejected(self, db_session, org_a):
        db_session.add(Organization(nombre="Otro", slug=org_a.slug))
        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()


class TestAdministratorModel:

    def test_email_is_lowercased(self):
        admin = Administrator(email="Admin@Patitas.ORG")
        assert admin.email == "admin@patitas.org"

    def test_invalid_email_rejected(self):
        with pytest.raises(ValueError):
            Administrator(email="no-es-un-email")

    def test_duplicate_email_rejected(self, db_session, admin_a, org_b, password_hash):
        db_session.add(Administrator(
            organizacion_id=org_b.id,
            username="otro",
            email=admin_a.email,
            password_hash=password_hash,
        ))
        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()

    def test_organization_with_administrators_cannot_be_deleted(self, db_session, admin_a, org_a):
        db_session.delete(org_a)
        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()
