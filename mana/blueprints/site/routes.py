from flask import render_template, request, redirect, url_for, flash, g, abort, current_app
from sqlalchemy.exc import SQLAlchemyError

from ...extensions import db
from ...forms import ContactForm, QuoteUploadForm
from ...i18n import translate as t
from ...models.portfolio import Project
from ...services import page_cache
from ...services.media_service import upload_file, UploadError
from ...services.settings_service import load_site_settings
from ...services.submissions import create_contact_message, create_quote_request

from . import site_bp


def _settings_page() -> tuple[dict, bool]:
    settings, fallback = load_site_settings()
    return {"settings": settings.to_dict()}, not fallback


def _settings_context() -> dict:
    return _settings_page()[0]


@site_bp.route("/")
def home():
    ctx = page_cache.get_or_build("home", g.locale, _settings_page)
    featured = Project.query.order_by(Project.created_at.desc()).limit(3).all()
    return render_template("site/home.html", featured=featured, **ctx)


@site_bp.route("/about")
def about():
    return render_template("site/about.html", **_settings_context())


@site_bp.route("/services")
def services():
    return render_template("site/services.html", **_settings_context())


@site_bp.route("/portfolio")
def portfolio():
    projects = Project.query.order_by(Project.created_at.desc()).all()
    categories = ["All"]
    for p in projects:
        if p.category and p.category not in categories:
            categories.append(p.category)

    active = (request.args.get("category") or "All").strip()
    if active != "All":
        projects = [p for p in projects if p.category == active]
    return render_template("site/portfolio.html", projects=projects, categories=categories, active=active)


@site_bp.route("/portfolio/<project_id>")
def project_detail(project_id):
    project = db.session.get(Project, project_id)
    if project is None:
        abort(404)
    return render_template("site/project_detail.html", project=project)


@site_bp.route("/contact", methods=["GET", "POST"])
def contact():
    form = ContactForm()
    if form.validate_on_submit():
        try:
            create_contact_message(form)
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error("Contact message error: %s", e)
            flash(t("Contact.error"), "danger")
        else:
            flash(t("Contact.sent"), "success")
            return redirect(url_for("site.contact"))

    ctx = page_cache.get_or_build("contact", g.locale, _settings_page)
    return render_template("site/contact.html", form=form, **ctx)


@site_bp.route("/quote", methods=["GET", "POST"])
def quote():
    form = QuoteUploadForm()
    if form.validate_on_submit():
        file_url = None
        f = form.attachment.data
        if f and getattr(f, "filename", ""):
            try:
                file_url = upload_file(f.stream, f.filename)["url"]
            except UploadError as e:
                current_app.logger.error("Quote attachment upload failed: %s", e)
                flash(t("Quote.uploadFailed"), "danger")
                return render_template("site/quote.html", form=form)
        try:
            create_quote_request(form, file_url=file_url)
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error("Quote request error: %s", e)
            flash(t("Quote.error"), "danger")
        else:
            flash(t("Quote.sent"), "success")
            return redirect(url_for("site.quote"))
    return render_template("site/quote.html", form=form)
