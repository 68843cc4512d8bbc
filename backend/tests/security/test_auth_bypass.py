"""Security tests for authentication bypass attempts

Tests cover:
- Protected endpoints reject missing, malformed, expired and forged tokens
- The "none" algorithm is refused
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi.testclient import TestClient

from adoption_api.config import get_settings

pytestmark = pytest.mark.security

PROTECTED = [
    ("get", "/api/auth/me"),
    ("get", "/api/adoption-requests"),
    ("get", "/api/adoption-requests/stats"),
    ("get", "/api/organization"),
    ("get", "/api/dashboard/stats"),
    ("post", "/api/auth/logout"),
]


def _token(admin, secret=None, algorithm="HS256", **overrides) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(admin.id),
        "org_id": admin.organizacion_id,
        "super_admin": False,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(hours=1)).timestamp()),
    }
    payload.update(overrides)
    return jwt.encode(payload, secret or get_settings().JWT_SECRET, algorithm=algorithm)


@pytest.mark.parametrize("method,path", PROTECTED)
def test_missing_token(client: TestClient, method, path):
    response = getattr(client, method)(path)

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "NO_TOKEN"


@pytest.mark.parametrize("method,path", PROTECTED)
def test_forged_signature(client: TestClient, admin_a, method, path):
    token = _token(admin_a, secret="attacker-secret-attacker-secret-attacker-secret")

    response = getattr(client, method)(path, headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_TOKEN"


def test_expired_token(client: TestClient, admin_a):
    past = datetime.now(timezone.utc) - timedelta(days=2)
    token = _token(admin_a, iat=int(past.timestamp()), exp=int((past + timedelta(days=1)).timestamp()))

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "TOKEN_EXPIRED"


def test_none_algorithm_rejected(client: TestClient, admin_a):
    token = jwt.encode(
        {"sub": str(admin_a.id), "org_id": admin_a.organizacion_id, "iat": 0, "exp": 9999999999},
        None,
        algorithm="none",
    )

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_non_bearer_scheme(client: TestClient, admin_a):
    response = client.get("/api/auth/me", headers={"Authorization": f"Basic {_token(admin_a)}"})
    assert response.status_code == 401


def test_malformed_subject(client: TestClient, admin_a):
    token = _token(admin_a, sub="admin")

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_TOKEN"
