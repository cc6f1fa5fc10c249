"""Password login and signed bearer tokens for the admin API."""

from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import current_app, request
from itsdangerous import BadSignature, URLSafeTimedSerializer
from werkzeug.security import check_password_hash

from .errors import ConfigurationError, InvalidCredential, Unauthenticated

ADMIN_ROLE = "admin"


def _signer() -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(
        current_app.config["SECRET_KEY"], salt=current_app.config["TOKEN_SALT"]
    )


def check_password(password: str, password_hash: Optional[str]) -> None:
    if not password_hash:
        raise ConfigurationError("Server not configured: BLOG_PASSWORD_HASH missing")
    if not check_password_hash(password_hash, password):
        raise InvalidCredential("Invalid password")


def issue_token() -> str:
    return _signer().dumps({"role": ADMIN_ROLE})


def verify_token(token: str) -> dict:
    try:
        claims = _signer().loads(token, max_age=current_app.config["TOKEN_MAX_AGE"])
    except BadSignature as exc:
        raise Unauthenticated("Invalid or expired token") from exc
    if not isinstance(claims, dict) or claims.get("role") != ADMIN_ROLE:
        raise Unauthenticated("Invalid or expired token")
    return claims


def token_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        header = request.headers.get("Authorization", "")
        if not header.startswith("Bearer "):
            raise Unauthenticated("Unauthorized")
        verify_token(header[len("Bearer "):])
        return view(*args, **kwargs)

    return wrapped
