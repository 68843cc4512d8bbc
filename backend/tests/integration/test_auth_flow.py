"""Integration tests for authentication flow

Tests cover:
- Login with valid and invalid credentials
- Inactive organizations cannot log in
- Token-based access to /auth/me and /auth/logout
- Missing, invalid and orphaned tokens
- Tokens issued before the organization was deactivated
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from adoption_api.auth.jwt import decode_token
from adoption_api.models import Administrator
from adoption_api.models.enums import AnimalStatus

pytestmark = pytest.mark.integration


class TestLoginEndpoint:
    """Test POST /api/auth/login"""

    def test_login_with_valid_credentials(self, client: TestClient, db_session: Session, admin_a):
        response = client.post(
            "/api/auth/login",
            json={"email": "admin@patitas.org", "password": "Secreta123"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["token_type"] == "bearer"
        assert data["expires_in"] == 1440 * 60
        assert data["admin"]["username"] == "admin_a"
        assert data["organizacion"]["slug"] == "refugio-patitas"

        payload = decode_token(data["token"])
        assert payload["sub"] == str(admin_a.id)
        assert payload["org_id"] == admin_a.organizacion_id
        assert payload["super_admin"] is False

    def test_login_updates_last_access(self, client: TestClient, db_session: Session, admin_a):
        assert admin_a.ultimo_acceso is None

        client.post("/api/auth/login", json={"email": admin_a.email, "password": "Secreta123"})

        db_session.expire_all()
        assert db_session.get(Administrator, admin_a.id).ultimo_acceso is not None

    def test_email_is_case_insensitive(self, client: TestClient, admin_a):
        response = client.post(
            "/api/auth/login",
            json={"email": "ADMIN@Patitas.org", "password": "Secreta123"},
        )
        assert response.status_code == 200

    def test_wrong_password(self, client: TestClient, admin_a):
        response = client.post(
            "/api/auth/login",
            json={"email": admin_a.email, "password": "incorrecta"},
        )

        assert response.status_code == 401
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "INVALID_CREDENTIALS"

    def test_unknown_email_gets_same_error(self, client: TestClient, admin_a):
        unknown = client.post(
            "/api/auth/login",
            json={"email": "nadie@patitas.org", "password": "Secreta123"},
        )
        wrong = client.post(
            "/api/auth/login",
            json={"email": admin_a.email, "password": "incorrecta"},
        )

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json()["error"] == wrong.json()["error"]

    def test_inactive_organization_gets_no_token(self, client: TestClient, inactive_admin):
        response = client.post(
            "/api/auth/login",
            json={"email": inactive_admin.email, "password": "Secreta123"},
        )

        assert response.status_code == 403
        body = response.json()
        assert body["error"]["code"] == "ORGANIZATION_INACTIVE"
        assert "data" not in body

    def test_missing_fields_are_validation_errors(self, client: TestClient):
        response = client.post("/api/auth/login", json={"email": "admin@patitas.org"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert {"field": "password", "message": "Field required"} in error["details"]

    def test_super_admin_token_carries_flag(self, client: TestClient, super_admin):
        response = client.post(
            "/api/auth/login",
            json={"email": super_admin.email, "password": "Secreta123"},
        )
        assert response.status_code == 200
        assert decode_token(response.json()["data"]["token"])["super_admin"] is True


class TestCurrentAdministrator:
    """Test GET /api/auth/me and POST /api/auth/logout"""

    def test_me(self, client: TestClient, auth_headers, admin_a):
        response = client.get("/api/auth/me", headers=auth_headers(admin_a))

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == admin_a.id
        assert data["email"] == "admin@patitas.org"
        assert data["organizacion"]["nombre"] == "Refugio Patitas Felices"
        assert "password_hash" not in data

    def test_me_without_token(self, client: TestClient):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "NO_TOKEN"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_me_with_garbage_token(self, client: TestClient):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer not.a.token"})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_TOKEN"

    def test_token_of_deleted_administrator(self, client: TestClient, db_session: Session, auth_headers, admin_a):
        headers = auth_headers(admin_a)
        db_session.delete(admin_a)
        db_session.commit()

        response = client.get("/api/auth/me", headers=headers)
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_TOKEN"

    def test_token_issued_before_deactivation(
        self, client: TestClient, db_session: Session, auth_headers, admin_a, org_a
    ):
        headers = auth_headers(admin_a)
        assert client.get("/api/auth/me", headers=headers).status_code == 200

        org_a.activa = False
        db_session.commit()

        me = client.get("/api/auth/me", headers=headers)
        assert me.status_code == 403
        assert me.json()["error"]["code"] == "ORGANIZATION_INACTIVE"

        create = client.post("/api/animals", json={}, headers=headers)
        assert create.status_code == 403

    def test_deactivated_organization_token_is_anonymous_on_public_endpoints(
        self, client: TestClient, db_session: Session, auth_headers, admin_a, org_a, make_animal
    ):
        adopted = make_animal(org_a, estado=AnimalStatus.ADOPTED)
        headers = auth_headers(admin_a)
        assert client.get(f"/api/animals/{adopted.id}", headers=headers).status_code == 200

        org_a.activa = False
        db_session.commit()

        assert client.get(f"/api/animals/{adopted.id}", headers=headers).status_code == 404

    def test_logout(self, client: TestClient, auth_headers, admin_a):
        response = client.post("/api/auth/logout", headers=auth_headers(admin_a))

        assert response.status_code == 200
        assert response.json()["success"] is True

    def test_logout_requires_token(self, client: TestClient):
        assert client.post("/api/auth/logout").status_code == 401
