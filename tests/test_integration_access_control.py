"""
The admin tree is open while Clerk is not configured and requires a verified
session token once both keys are present.
"""
import base64

import jwt
import pytest

from carbooking.utils import decorators
from carbooking.utils.decorators import is_protected_path, jwks_url_from_publishable_key


class FakeVerifier:
    def verify(self, token):
        if token != "good-token":
            raise jwt.InvalidTokenError("bad signature")
        return {"sub": "user_123"}


@pytest.fixture
def gated(app, monkeypatch):
    app.config.update(CLERK_PUBLISHABLE_KEY="pk_test_Zm9vLmNsZXJrLmFjY291bnRzLmRldiQ",
                      CLERK_SECRET_KEY="sk_test_x")
    monkeypatch.setattr(decorators, "get_verifier", lambda app: FakeVerifier())
    return app


def test_admin_open_when_clerk_not_configured(client):
    r = client.get("/admin/summary")
    assert r.status_code == 200
    assert r.get_json()["success"] is True


def test_admin_requires_token_when_configured(client, gated):
    r = client.get("/admin/summary")
    assert r.status_code == 401
    assert r.get_json() == {"success": False, "message": "Unauthorized"}


def test_admin_rejects_invalid_token(client, gated):
    r = client.get("/admin/summary", headers={"Authorization": "Bearer forged"})
    assert r.status_code == 401


def test_admin_accepts_bearer_or_session_cookie(client, gated):
    r = client.get("/admin/summary", headers={"Authorization": "Bearer good-token"})
    assert r.status_code == 200

    client.set_cookie("__session", "good-token")
    assert client.get("/admin/summary").status_code == 200


def test_public_api_is_not_gated(client, gated):
    assert client.get("/api/themes").status_code == 200


def test_prefix_matching():
    assert is_protected_path("/admin", "/admin")
    assert is_protected_path("/admin/cars", "/admin")
    assert not is_protected_path("/administrator", "/admin")
    assert not is_protected_path("/api/admin", "/admin")


def test_jwks_url_from_publishable_key():
    host = "clever-cat-12.clerk.accounts.dev"
    encoded = base64.b64encode(f"{host}$".encode()).decode().rstrip("=")
    assert jwks_url_from_publishable_key(f"pk_live_{encoded}") == f"https://{host}/.well-known/jwks.json"


def test_malformed_publishable_key_is_rejected():
    # "//4=" decodes to bytes that are not UTF-8
    with pytest.raises(ValueError):
        jwks_url_from_publishable_key("pk_test_//4")


def test_malformed_publishable_key_denies_admin_and_logs(client, app, caplog):
    app.config.update(CLERK_PUBLISHABLE_KEY="pk_test_//4", CLERK_SECRET_KEY="sk_test_x")
    with caplog.at_level("ERROR", logger="carbooking.utils.decorators"):
        r = client.get("/admin/summary", headers={"Authorization": "Bearer some-token"})
    assert r.status_code == 401
    assert r.get_json() == {"success": False, "message": "Unauthorized"}
    assert "misconfigured" in caplog.text
