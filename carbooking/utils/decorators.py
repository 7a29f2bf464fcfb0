"""
Access gate for the admin path tree.

Sessions are issued by Clerk. When both Clerk keys are configured, any request
to `/admin` or below must carry a valid Clerk session token, either as a
Bearer header or in the `__session` cookie. Without the keys the gate is
disabled and every request passes.
"""
import base64
import logging
from functools import wraps

import jwt
from flask import current_app, g, jsonify, request

logger = logging.getLogger(__name__)

SESSION_COOKIE = "__session"


def jwks_url_from_publishable_key(publishable_key: str) -> str:
    """
    Clerk publishable keys are `pk_test_` / `pk_live_` followed by the base64
    encoded frontend API host with a trailing `$`.
    """
    encoded = publishable_key.split("_", 2)[-1]
    encoded += "=" * (-len(encoded) % 4)
    try:
        host = base64.b64decode(encoded).decode("utf-8").rstrip("$")
    except ValueError as e:
        # binascii.Error and UnicodeDecodeError are both ValueErrors
        raise ValueError(f"Malformed Clerk publishable key: {e}") from e
    if not host:
        raise ValueError("Malformed Clerk publishable key: empty frontend API host")
    return f"https://{host}/.well-known/jwks.json"


class ClerkSessionVerifier:
    def __init__(self, publishable_key: str):
        self.jwks_url = jwks_url_from_publishable_key(publishable_key)
        self._jwks = jwt.PyJWKClient(self.jwks_url)

    def verify(self, token: str) -> dict:
        signing_key = self._jwks.get_signing_key_from_jwt(token)
        return jwt.decode(
            token,
            signing_key.key,
            algorithms=["RS256"],
            options={"verify_aud": False},
        )


def gate_enabled(config) -> bool:
    return bool(config.get("CLERK_PUBLISHABLE_KEY") and config.get("CLERK_SECRET_KEY"))


def is_protected_path(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix.rstrip("/") + "/")


def get_verifier(app):
    """Return the cached verifier, or None when the publishable key is unusable."""
    verifier = app.extensions.get("clerk_verifier")
    if verifier is None:
        try:
            verifier = ClerkSessionVerifier(app.config["CLERK_PUBLISHABLE_KEY"])
        except ValueError as e:
            logger.error("Admin gate misconfigured, denying access: %s", e)
            return None
        app.extensions["clerk_verifier"] = verifier
    return verifier


def _session_token():
    header = request.headers.get("Authorization", "")
    if header.lower().startswith("bearer "):
        return header[7:].strip() or None
    return request.cookies.get(SESSION_COOKIE)


def _unauthorized():
    return jsonify({"success": False, "message": "Unauthorized"}), 401


def check_admin_session():
    """Return None when the request may proceed, else a 401 response."""
    token = _session_token()
    if not token:
        logger.warning("Rejected %s %s: no session token", request.method, request.path)
        return _unauthorized()
    verifier = get_verifier(current_app._get_current_object())
    if verifier is None:
        return _unauthorized()
    try:
        g.clerk_claims = verifier.verify(token)
    except jwt.PyJWTError as e:
        logger.warning("Rejected %s %s: %s", request.method, request.path, e)
        return _unauthorized()
    return None


def admin_required(fn):
    """Protect a single view; a no-op while the gate is disabled."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if gate_enabled(current_app.config) and "clerk_claims" not in g:
            denied = check_admin_session()
            if denied is not None:
                return denied
        return fn(*args, **kwargs)

    return wrapper


def install_admin_gate(app) -> None:
    """Register the before_request hook guarding ADMIN_PATH_PREFIX."""

    @app.before_request
    def _admin_gate():
        if request.method == "OPTIONS":
            return None
        if not gate_enabled(current_app.config):
            return None
        if not is_protected_path(request.path, current_app.config["ADMIN_PATH_PREFIX"]):
            return None
        return check_admin_session()
