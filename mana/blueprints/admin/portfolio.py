from flask import render_template, redirect, url_for, flash, abort, current_app, request
from flask_login import login_required
from sqlalchemy.exc import SQLAlchemyError

from ...extensions import db
from ...models.portfolio import Project
from ...services.catalog import create_project
from ...services.media_service import upload_file, UploadError
from . import admin_bp
from .utils import form_text, form_localized

CATEGORIES = ["Machining", "Repair", "Fabrication", "Modification", "Manufacturing", "Restoration", "Other"]


@admin_bp.route("/portfolio")
@login_required
def portfolio_list():
    projects = Project.query.order_by(Project.created_at.desc()).all()
    return render_template("admin/portfolio.html", projects=projects, categories=CATEGORIES)


@admin_bp.route("/portfolio/new", methods=["POST"])
@login_required
def portfolio_new():
    title = form_localized("title")
    if not title.get("en"):
        flash("English title required.", "warning")
        return redirect(url_for("admin.portfolio_list"))

    image_url, public_id = form_text("image_url"), ""
    f = request.files.get("image")
    if f and f.filename:
        try:
            uploaded = upload_file(f.stream, f.filename)
        except UploadError as e:
            current_app.logger.error("Project image upload failed: %s", e)
            flash(f"Image upload failed: {e}", "danger")
            return redirect(url_for("admin.portfolio_list"))
        image_url, public_id = uploaded["url"], uploaded.get("publicId") or ""
    if not image_url:
        flash("An image (upload or URL) is required.", "warning")
        return redirect(url_for("admin.portfolio_list"))

    try:
        create_project({
            "title": title,
            "description": form_localized("description"),
            "category": form_text("category") or "Other",
            "imageUrl": image_url,
            "publicId": public_id,
        })
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error("Project create failed: %s", e)
        flash("Failed to create project.", "danger")
    else:
        flash("Project added.", "success")
    return redirect(url_for("admin.portfolio_list"))


@admin_bp.route("/portfolio/<project_id>/delete", methods=["POST"])
@login_required
def portfolio_delete(project_id):
    project = db.session.get(Project, project_id)
    if project is None:
        abort(404)
    db.session.delete(project)
    db.session.commit()
    flash("Project deleted.", "success")
    return redirect(url_for("admin.portfolio_list"))
