import os
import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime
from pathlib import Path

import click
from flask import Flask, Response, abort, jsonify, redirect, request, session, url_for
from werkzeug.exceptions import HTTPException

from .extensions import db, migrate, login_manager, csrf, babel
from .config import Config
from .i18n import (
    current_locale,
    localized,
    negotiate_locale,
    path_locale,
    supported_locales,
    switch_locale_url,
    text_direction,
    translate,
)
from .security import admin_gate

# Blueprints
from .blueprints.errors import errors_bp
from .blueprints.api import api_bp
from .blueprints.site import site_bp
from .blueprints.admin import admin_bp

PASS_THROUGH_ENDPOINTS = {"static", "robots_txt", "health"}


# Optional: Sentry
def _init_sentry(app):
    dsn = app.config.get("SENTRY_DSN")
    if not dsn:
        return
    import sentry_sdk
    from sentry_sdk.integrations.flask import FlaskIntegration
    from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

    sentry_sdk.init(
        dsn=dsn,
        integrations=[FlaskIntegration(), SqlalchemyIntegration()],
        traces_sample_rate=app.config.get("SENTRY_TRACES_SAMPLE_RATE", 0.0),
        environment=os.getenv("ENV", "development"),
        release=app.config.get("APP_VERSION") or os.getenv("GIT_COMMIT", None),
        send_default_pii=False,
    )
    app.logger.info("Sentry initialized.")


def _init_logging(app):
    # Base level
    level_name = app.config.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    app.logger.setLevel(level)

    # Ensure log dir exists
    log_dir = Path(app.config.get("LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / app.config.get("LOG_FILENAME", "mana.log")

    # Formatter: text or JSON
    if app.config.get("LOG_JSON", False):
        import json_log_formatter
        formatter = json_log_formatter.JSONFormatter()
    else:
        formatter = logging.Formatter("[%(asctime)s] %(levelname)s in %(module)s: %(message)s")

    # the "mana" logger outlives one app; drop handlers from an earlier factory call
    for h in [h for h in app.logger.handlers if h.get_name() == "mana"]:
        app.logger.removeHandler(h)
        h.close()

    # Rotating file handler (5MB x 5)
    file_handler = RotatingFileHandler(
        log_path, maxBytes=5_000_000, backupCount=5, encoding="utf-8"
    )
    file_handler.set_name("mana")
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    app.logger.addHandler(file_handler)

    # Stream to stdout as well (useful on dev/docker)
    stream_handler = logging.StreamHandler()
    stream_handler.set_name("mana")
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    app.logger.addHandler(stream_handler)

    app.logger.info("Logging initialized.")


def _routable(app, path: str) -> bool:
    adapter = app.url_map.bind(request.host, url_scheme=request.scheme)
    try:
        adapter.match(path, method="GET")
    except HTTPException:
        return False
    return True


def _register_cli(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("create-admin")
    @click.option("--email", prompt=True)
    @click.option("--name", prompt="Full name", default="")
    @click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
    def create_admin(email, name, password):
        """Create an ADMIN user."""
        from .models.user import User

        email = email.strip().lower()
        if User.query.filter_by(email=email).first():
            click.echo("User with that email already exists.")
            return
        user = User(name=name.strip() or None, email=email, role=app.config.get("ADMIN_ROLE", "ADMIN"))
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        click.echo(f"Admin user {email} created successfully.")


def create_app(config_object=None):
    app = Flask(__name__, instance_relative_config=True)

    if config_object is None:
        app.config.from_object(Config)
    else:
        app.config.from_object(config_object)

    app.config.from_pyfile("config.py", silent=True)

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    csrf.init_app(app)
    csrf.exempt(api_bp)
    babel.init_app(app, locale_selector=current_locale)

    login_manager.login_view = "admin.login"

    @app.context_processor
    def inject_i18n_helpers():
        loc = current_locale()
        return {
            "t": translate,
            "locale": loc,
            "text_dir": text_direction(loc),
            "locales": supported_locales(),
            "switch_locale_url": switch_locale_url,
            "localized": localized,
        }

    @app.context_processor
    def inject_now():
        return {"now": datetime.utcnow}

    @app.before_request
    def _route_request():
        if request.endpoint in PASS_THROUGH_ENDPOINTS:
            return None

        gated = admin_gate()
        if gated is not None:
            return gated

        path = request.path
        if path == "/api" or path.startswith("/api/"):
            return None

        loc = path_locale(path)
        if loc:
            session["lang"] = loc
            return None

        target = negotiate_locale()
        if path == "/":
            new_path = url_for("site.home", locale=target)
        else:
            new_path = f"/{target}{path}"
            if not _routable(app, new_path):
                abort(404)
        if request.query_string:
            new_path += "?" + request.query_string.decode("utf-8", "replace")
        return redirect(new_path)

    # Logging must come before blueprints so errors during register are captured
    _init_logging(app)
    _init_sentry(app)

    # Blueprints
    app.register_blueprint(errors_bp)  # error handlers
    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(site_bp)
    app.register_blueprint(admin_bp)

    @app.route("/")
    def index():
        # answered by _route_request; kept so "/" is a known URL
        return redirect(url_for("site.home", locale=current_locale()))

    @app.route("/robots.txt")
    def robots_txt():
        site_url = app.config.get("SITE_URL", "").rstrip("/")
        body = "\n".join([
            "User-agent: *",
            "Allow: /",
            "Disallow: /api/",
            "Disallow: /*/admin/",
            "Disallow: /*/login",
            "",
            f"Sitemap: {site_url}/sitemap.xml",
            "",
        ])
        return Response(body, mimetype="text/plain")

    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "version": app.config.get("APP_VERSION")})

    _register_cli(app)
    return app
