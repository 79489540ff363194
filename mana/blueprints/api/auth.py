from flask import current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from ...security import authenticate, issue_token, set_auth_cookie, clear_auth_cookie
from . import api_bp
from .utils import json_body, bad_request


@api_bp.post("/auth/login")
def login():
    data = json_body()
    if data is None:
        return bad_request("Invalid request body")
    email, password = data.get("email"), data.get("password")
    if not isinstance(email, str) or not isinstance(password, str):
        return jsonify({"success": False, "error": "Invalid credentials"}), 401

    try:
        user = authenticate(email, password)
    except SQLAlchemyError as e:
        current_app.logger.error("Login error: %s", e)
        return jsonify({"success": False, "error": "Authentication failed"}), 500

    if user is None or not user.is_admin:
        current_app.logger.info("Failed admin login")
        return jsonify({"success": False, "error": "Invalid credentials"}), 401

    resp = jsonify({"success": True, "user": user.public_dict()})
    set_auth_cookie(resp, issue_token(user))
    current_app.logger.info("Admin login: %s", user.email)
    return resp


@api_bp.post("/auth/logout")
def logout():
    return clear_auth_cookie(jsonify({"success": True}))
