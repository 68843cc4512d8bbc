"""Integration tests for the administrator dashboard"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from adoption_api.dashboard.service import adoption_rate
from adoption_api.models import AnimalStatus, RequestStatus

pytestmark = pytest.mark.integration


class TestDashboardStats:
    """GET /api/dashboard/stats"""

    def test_counts_for_own_organization(
        self, client: TestClient, auth_headers, admin_a, org_a, org_b, make_animal, make_request
    ):
        luna = make_animal(org_a)
        make_animal(org_a, estado=AnimalStatus.ADOPTED)
        make_animal(org_a, estado=AnimalStatus.ADOPTED)
        make_animal(org_a, fecha_publicacion=datetime.now(timezone.utc) - timedelta(days=45))
        make_animal(org_b)
        make_request(luna)
        make_request(luna, estado_solicitud=RequestStatus.APPROVED)

        response = client.get("/api/dashboard/stats", headers=auth_headers(admin_a))

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["animales"]["total"] == 4
        assert data["animales"]["ultimos_30_dias"] == 3
        assert data["animales"]["por_estado"] == {
            "Disponible": 2,
            "En proceso": 0,
            "En transito": 0,
            "Adoptado": 2,
        }
        assert data["solicitudes"]["total"] == 2
        assert data["solicitudes"]["por_estado"]["Aprobada"] == 1
        assert data["tasa_adopcion"] == 50.0

    def test_empty_organization(self, client: TestClient, auth_headers, admin_b):
        data = client.get("/api/dashboard/stats", headers=auth_headers(admin_b)).json()["data"]

        assert data["animales"]["total"] == 0
        assert data["solicitudes"]["total"] == 0
        assert data["tasa_adopcion"] == 0.0

    def test_super_admin_sees_own_organization_only(
        self, client: TestClient, auth_headers, super_admin, org_a, make_animal
    ):
        make_animal(org_a)

        data = client.get("/api/dashboard/stats", headers=auth_headers(super_admin)).json()["data"]
        assert data["animales"]["total"] == 0

    def test_requires_token(self, client: TestClient):
        assert client.get("/api/dashboard/stats").status_code == 401


@pytest.mark.parametrize("adopted,total,expected", [(0, 0, 0.0), (1, 3, 33.3), (3, 3, 100.0)])
def test_adoption_rate(adopted, total, expected):
    assert adoption_rate(adopted, total) == expected
