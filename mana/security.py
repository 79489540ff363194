# mana/security.py
from typing import Optional

from flask import current_app, g, jsonify, redirect, request
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired
from werkzeug.security import check_password_hash, generate_password_hash

from .extensions import db, login_manager
from .i18n import resolve_locale
from .models.user import User

# compared against when the email is unknown so both failure paths hash once
_DUMMY_HASH = generate_password_hash("mana-dummy-password")


# -----------------
# Tokens
# -----------------

def _ts() -> URLSafeTimedSerializer:
    secret_key = current_app.config.get("SECRET_KEY")
    salt = current_app.config.get("AUTH_TOKEN_SALT", "mana-admin-session")
    return URLSafeTimedSerializer(secret_key=secret_key, salt=salt)


def issue_token(user: User) -> str:
    return _ts().dumps({"uid": user.id, "email": user.email, "role": user.role})


def verify_token(token: str) -> Optional[dict]:
    """Claims of a valid, unexpired admin token; None otherwise."""
    max_age = current_app.config.get("AUTH_TOKEN_MAX_AGE", 8 * 60 * 60)
    try:
        data = _ts().loads(token, max_age=max_age)
    except (BadSignature, SignatureExpired, ValueError, TypeError):
        return None
    if not isinstance(data, dict):
        return None
    if data.get("role") != current_app.config.get("ADMIN_ROLE", "ADMIN"):
        return None
    return data


def authenticate(email: str, password: str) -> Optional[User]:
    email = (email or "").strip().lower()
    user = User.query.filter_by(email=email).first() if email else None
    if user is None:
        check_password_hash(_DUMMY_HASH, password or "")
        return None
    if not user.check_password(password or ""):
        return None
    return user


# -----------------
# Cookie
# -----------------

def set_auth_cookie(resp, token: str):
    resp.set_cookie(
        current_app.config["AUTH_COOKIE_NAME"],
        token,
        max_age=current_app.config.get("AUTH_TOKEN_MAX_AGE", 8 * 60 * 60),
        secure=bool(current_app.config.get("SESSION_COOKIE_SECURE", False)),
        httponly=True,
        samesite="Strict",
        path="/",
    )
    return resp


def clear_auth_cookie(resp):
    resp.set_cookie(
        current_app.config["AUTH_COOKIE_NAME"],
        "",
        expires=0,
        secure=bool(current_app.config.get("SESSION_COOKIE_SECURE", False)),
        httponly=True,
        samesite="Strict",
        path="/",
    )
    return resp


# -----------------
# Gate
# -----------------

def is_admin_api(path: str) -> bool:
    return path == "/api/admin" or path.startswith("/api/admin/")


def is_admin_page(path: str) -> bool:
    if path.startswith("/api/"):
        return False
    parts = [p for p in path.split("/") if p]
    if "admin" not in parts:
        return False
    return "login" not in parts


def login_url_for(path: str) -> str:
    return f"/{resolve_locale(path)}/admin/login"


def _admin_user(claims) -> Optional[User]:
    user = db.session.get(User, claims.get("uid"))
    if user is None or user.role != current_app.config.get("ADMIN_ROLE", "ADMIN"):
        return None
    return user


def admin_gate():
    """before_request hook; returns a response to short-circuit, else None."""
    path = request.path
    api = is_admin_api(path)
    if not (api or is_admin_page(path)):
        return None

    token = request.cookies.get(current_app.config["AUTH_COOKIE_NAME"])
    claims = verify_token(token) if token else None
    if claims and _admin_user(claims) is None:
        # signed for an account that has since been removed or demoted
        claims = None
    if claims:
        g.admin_claims = claims
        return None

    if api:
        return jsonify({"error": "Unauthorized"}), 401

    resp = redirect(login_url_for(path))
    if token:
        current_app.logger.info("Rejected admin token for %s", path)
        clear_auth_cookie(resp)
    return resp


@login_manager.request_loader
def load_user_from_cookie(req):
    token = req.cookies.get(current_app.config["AUTH_COOKIE_NAME"])
    claims = verify_token(token) if token else None
    if not claims:
        return None
    return _admin_user(claims)
