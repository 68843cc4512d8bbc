"""Integration tests for organization profile endpoints"""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


class TestOwnOrganization:
    """GET/PUT /api/organization"""

    def test_get_own_profile(self, client: TestClient, auth_headers, admin_a):
        response = client.get("/api/organization", headers=auth_headers(admin_a))

        assert response.status_code == 200
        org = response.json()["data"]["organizacion"]
        assert org["slug"] == "refugio-patitas"
        assert org["email"] == "contacto@patitas.org"
        assert org["donacion_cbu"] == "0000003100012345678901"

    def test_requires_token(self, client: TestClient):
        assert client.get("/api/organization").status_code == 401

    def test_partial_update(self, client: TestClient, auth_headers, admin_a):
        response = client.put(
            "/api/organization",
            json={"instagram": "@patitas", "donacion_alias": "patitas.felices"},
            headers=auth_headers(admin_a),
        )

        assert response.status_code == 200
        org = response.json()["data"]["organizacion"]
        assert org["instagram"] == "@patitas"
        assert org["donacion_alias"] == "patitas.felices"
        assert org["nombre"] == "Refugio Patitas Felices"

    def test_slug_and_active_flag_are_not_editable(self, client: TestClient, auth_headers, admin_a):
        response = client.put(
            "/api/organization",
            json={"slug": "otro-slug", "activa": False},
            headers=auth_headers(admin_a),
        )

        org = response.json()["data"]["organizacion"]
        assert org["slug"] == "refugio-patitas"
        assert org["activa"] is True

    def test_null_name_is_ignored(self, client: TestClient, auth_headers, admin_a):
        response = client.put(
            "/api/organization",
            json={"nombre": None, "telefono": None},
            headers=auth_headers(admin_a),
        )

        org = response.json()["data"]["organizacion"]
        assert org["nombre"] == "Refugio Patitas Felices"
        assert org["telefono"] is None

    @pytest.mark.parametrize("nombre", ["   ", " a "])
    def test_blank_name_is_rejected(self, client: TestClient, auth_headers, admin_a, nombre):
        response = client.put(
            "/api/organization",
            json={"nombre": nombre},
            headers=auth_headers(admin_a),
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"][0]["field"] == "nombre"

        profile = client.get("/api/organization", headers=auth_headers(admin_a))
        assert profile.json()["data"]["organizacion"]["nombre"] == "Refugio Patitas Felices"

    def test_name_is_stripped(self, client: TestClient, auth_headers, admin_a):
        response = client.put(
            "/api/organization",
            json={"nombre": "  Patitas Libres  "},
            headers=auth_headers(admin_a),
        )

        assert response.status_code == 200
        assert response.json()["data"]["organizacion"]["nombre"] == "Patitas Libres"

    def test_invalid_logo_url(self, client: TestClient, auth_headers, admin_a):
        response = client.put(
            "/api/organization",
            json={"logo_url": "logo.png"},
            headers=auth_headers(admin_a),
        )
        assert response.status_code == 400

    def test_update_only_touches_own_organization(self, client: TestClient, auth_headers, admin_a, admin_b):
        client.put("/api/organization", json={"descripcion": "Editado"}, headers=auth_headers(admin_a))

        other = client.get("/api/organization", headers=auth_headers(admin_b)).json()["data"]["organizacion"]
        assert other["descripcion"] is None


class TestPublicProfile:
    """GET /api/organization/{slug}"""

    def test_public_profile_hides_private_fields(self, client: TestClient, org_a):
        response = client.get("/api/organization/refugio-patitas")

        assert response.status_code == 200
        org = response.json()["data"]["organizacion"]
        assert org["nombre"] == "Refugio Patitas Felices"
        assert "email" not in org
        assert "donacion_cbu" not in org

    def test_inactive_organization_is_not_found(self, client: TestClient, inactive_org):
        assert client.get(f"/api/organization/{inactive_org.slug}").status_code == 404

    def test_unknown_slug(self, client: TestClient):
        response = client.get("/api/organization/no-existe")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"
