from flask import current_app, jsonify, render_template, request
from werkzeug.exceptions import HTTPException
from flask_wtf.csrf import CSRFError
from sqlalchemy.exc import SQLAlchemyError
from ...extensions import db
from . import errors_bp


def _wants_json() -> bool:
    return request.path.startswith("/api/")


def _rollback():
    # a failed DB action must not leave the session in a broken transaction
    try:
        db.session.rollback()
    except SQLAlchemyError as e:
        current_app.logger.warning("Rollback failed: %s", e)


# 404: Not Found
@errors_bp.app_errorhandler(404)
def err_404(e):
    if _wants_json():
        return jsonify({"error": "Not Found"}), 404
    return render_template("errors/404.html", path=request.path), 404


# 413: Payload Too Large (uploads)
@errors_bp.app_errorhandler(413)
def err_413(e):
    if _wants_json():
        return jsonify({"error": "File too large."}), 413
    return render_template("errors/http_generic.html", code=413, name=e.name, description=e.description), 413


# CSRF: treated as 400 Bad Request
@errors_bp.app_errorhandler(CSRFError)
def err_csrf(e):
    return render_template("errors/http_generic.html", code=400, name="Bad Request", description=e.description), 400


# 500: Internal Server Error
@errors_bp.app_errorhandler(500)
def err_500(e):
    _rollback()
    if _wants_json():
        return jsonify({"error": "Internal Server Error"}), 500
    return render_template("errors/500.html"), 500


# Fallback for uncaught HTTPException
@errors_bp.app_errorhandler(HTTPException)
def err_http(e: HTTPException):
    if _wants_json():
        return jsonify({"error": e.name}), e.code
    return render_template("errors/http_generic.html", code=e.code, name=e.name, description=e.description), e.code


# Last-resort: any other Exception
@errors_bp.app_errorhandler(Exception)
def err_unexpected(e):
    _rollback()
    current_app.logger.exception("Unhandled error on %s: %s", request.path, e)
    if _wants_json():
        return jsonify({"error": "Internal Server Error"}), 500
    # generic page, no internals
    return render_template("errors/500.html"), 500
