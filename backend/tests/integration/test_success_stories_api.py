"""Integration tests for success story endpoints"""

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from adoption_api.models import AnimalStatus, SuccessStory

pytestmark = pytest.mark.integration


def _story_form(animal_id: int, **overrides) -> dict:
    form = {
        "animal_id": animal_id,
        "titulo": "Luna encontró familia",
        "historia": "Luna vive feliz con su nueva familia y dos niños que la adoran.",
        "foto_actual_1": "https://cdn.example.com/adopcion/luna-hoy.jpg",
        "fecha_adopcion": "2026-01-15",
    }
    form.update(overrides)
    return form


@pytest.fixture
def make_story(db_session: Session):
    def _make(animal, **overrides) -> SuccessStory:
        fields = {
            "titulo": f"{animal.nombre} encontró familia",
            "historia": "Vive feliz con su nueva familia desde hace meses.",
            "fecha_adopcion": date(2026, 1, 15),
        }
        fields.update(overrides)
        story = SuccessStory(animal_id=animal.id, organizacion_id=animal.organizacion_id, **fields)
        db_session.add(story)
        db_session.commit()
        db_session.refresh(story)
        return story
    return _make


class TestPublicStories:
    """GET /api/casos-exito and /api/casos-exito/{slug}"""

    def test_grouped_by_active_organization(
        self, client: TestClient, org_a, org_b, inactive_org, make_animal, make_story
    ):
        make_story(make_animal(org_a, nombre="Luna", estado=AnimalStatus.ADOPTED))
        make_story(make_animal(inactive_org, nombre="Toby", estado=AnimalStatus.ADOPTED))

        response = client.get("/api/casos-exito")

        assert response.status_code == 200
        organizaciones = response.json()["data"]["organizaciones"]
        assert [o["slug"] for o in organizaciones] == ["refugio-patitas"]
        assert organizaciones[0]["casos_exito"][0]["animal"]["nombre"] == "Luna"

    def test_stories_for_slug(self, client: TestClient, org_a, make_animal, make_story):
        make_story(make_animal(org_a, nombre="Luna", estado=AnimalStatus.ADOPTED))
        make_story(make_animal(org_a, nombre="Rocky", estado=AnimalStatus.ADOPTED))

        response = client.get("/api/casos-exito/refugio-patitas")

        organizacion = response.json()["data"]["organizacion"]
        assert {s["animal"]["nombre"] for s in organizacion["casos_exito"]} == {"Luna", "Rocky"}

    def test_organization_without_stories(self, client: TestClient, org_b):
        response = client.get("/api/casos-exito/huellitas-amor")

        assert response.status_code == 200
        assert response.json()["data"]["organizacion"]["casos_exito"] == []

    def test_inactive_organization_not_found(self, client: TestClient, inactive_org):
        assert client.get(f"/api/casos-exito/{inactive_org.slug}").status_code == 404


class TestCreateStory:
    """POST /api/casos-exito"""

    def test_create(self, client: TestClient, auth_headers, admin_a, org_a, make_animal):
        animal = make_animal(org_a, estado=AnimalStatus.ADOPTED)

        response = client.post("/api/casos-exito", json=_story_form(animal.id), headers=auth_headers(admin_a))

        assert response.status_code == 201
        story = response.json()["data"]["caso_exito"]
        assert story["organizacion_id"] == org_a.id
        assert story["fecha_adopcion"] == "2026-01-15"

    def test_one_story_per_animal(self, client: TestClient, auth_headers, admin_a, org_a, make_animal):
        animal = make_animal(org_a, estado=AnimalStatus.ADOPTED)
        headers = auth_headers(admin_a)
        client.post("/api/casos-exito", json=_story_form(animal.id), headers=headers)

        response = client.post("/api/casos-exito", json=_story_form(animal.id), headers=headers)

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "DUPLICATE_ERROR"

    def test_other_organization_animal(self, client: TestClient, auth_headers, admin_b, org_a, make_animal):
        animal = make_animal(org_a, estado=AnimalStatus.ADOPTED)

        response = client.post("/api/casos-exito", json=_story_form(animal.id), headers=auth_headers(admin_b))
        assert response.status_code == 403

    def test_unknown_animal(self, client: TestClient, auth_headers, admin_a):
        response = client.post("/api/casos-exito", json=_story_form(9999), headers=auth_headers(admin_a))

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ANIMAL_NOT_FOUND"

    def test_requires_token(self, client: TestClient):
        assert client.post("/api/casos-exito", json=_story_form(1)).status_code == 401


class TestUpdateStory:
    """PUT /api/casos-exito/{id}"""

    def test_partial_update(self, client: TestClient, auth_headers, admin_a, org_a, make_animal, make_story):
        story = make_story(make_animal(org_a, estado=AnimalStatus.ADOPTED))

        response = client.put(
            f"/api/casos-exito/{story.id}",
            json={"titulo": "Nuevo título", "historia": None},
            headers=auth_headers(admin_a),
        )

        assert response.status_code == 200
        data = response.json()["data"]["caso_exito"]
        assert data["titulo"] == "Nuevo título"
        assert data["historia"] == "Vive feliz con su nueva familia desde hace meses."

    def test_other_organization_cannot_update(
        self, client: TestClient, auth_headers, admin_b, org_a, make_animal, make_story
    ):
        story = make_story(make_animal(org_a, estado=AnimalStatus.ADOPTED))

        response = client.put(
            f"/api/casos-exito/{story.id}", json={"titulo": "Robado"}, headers=auth_headers(admin_b)
        )
        assert response.status_code == 403

    def test_missing_story(self, client: TestClient, auth_headers, admin_a):
        response = client.put("/api/casos-exito/9999", json={"titulo": "Nada"}, headers=auth_headers(admin_a))
        assert response.status_code == 404
