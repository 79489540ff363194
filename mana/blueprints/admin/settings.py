from flask import render_template, redirect, url_for, flash, current_app, request
from flask_login import login_required
from sqlalchemy.exc import SQLAlchemyError

from ...extensions import db
from ...models.settings import EDITABLE_FIELDS
from ...services.settings_service import get_site_settings, update_site_settings
from . import admin_bp

SECTIONS = [
    ("General", ["siteName", "address", "email", "phone", "whatsapp"]),
    ("Social", ["facebook", "linkedin", "instagram"]),
    ("Images", [k for k in EDITABLE_FIELDS if k.endswith("Url")]),
    ("Business hours", [k for k in EDITABLE_FIELDS if k.startswith("businessHours")]),
]


@admin_bp.route("/settings", methods=["GET", "POST"])
@login_required
def settings_edit():
    if request.method == "POST":
        try:
            update_site_settings(request.form.to_dict())
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error("Settings update failed: %s", e)
            flash("Failed to update settings.", "danger")
        else:
            flash("Settings saved.", "success")
        return redirect(url_for("admin.settings_edit"))

    settings = get_site_settings()
    return render_template("admin/settings.html", settings=settings.to_dict(), sections=SECTIONS)
