from flask import current_app, jsonify, request
from werkzeug.datastructures import MultiDict

from ...extensions import db


def json_body() -> dict | None:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def json_formdata(data: dict) -> MultiDict:
    """Scalar JSON values as strings, the way a browser form would post them."""
    out = MultiDict()
    for k, v in data.items():
        if isinstance(v, (dict, list)):
            continue
        if isinstance(v, bool):
            v = "true" if v else ""
        out[k] = "" if v is None else str(v)
    return out


def bad_request(message: str, **extra):
    return jsonify({"success": False, "error": message, **extra}), 400


def validation_failed(form):
    return bad_request("Validation failed", fields=form.errors)


def failure(message: str, exc: Exception | None = None, status: int = 500):
    """Roll back, log, and answer with a generic error body."""
    db.session.rollback()
    if exc is not None:
        current_app.logger.error("%s: %s", message, exc)
    return jsonify({"error": message}), status


def get_or_none(model, ident):
    if not isinstance(ident, str) or not ident:
        return None
    return db.session.get(model, ident)
