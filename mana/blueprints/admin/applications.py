from flask import render_template, redirect, url_for, flash, abort, request
from flask_login import login_required
from sqlalchemy.orm import joinedload

from ...extensions import db
from ...models.careers import Application, APPLICATION_STATUSES
from . import admin_bp


@admin_bp.route("/applications")
@login_required
def applications_list():
    status = (request.args.get("status") or "").strip().upper()
    q = Application.query.options(joinedload(Application.job))
    if status in APPLICATION_STATUSES:
        q = q.filter(Application.status == status)
    apps = q.order_by(Application.created_at.desc()).all()
    return render_template("admin/applications.html", apps=apps, statuses=APPLICATION_STATUSES, status=status)


@admin_bp.route("/applications/<app_id>", methods=["POST"])
@login_required
def applications_update(app_id):
    a = db.session.get(Application, app_id)
    if a is None:
        abort(404)
    status = (request.form.get("status") or "").strip().upper()
    if status:
        if status not in APPLICATION_STATUSES:
            flash("Invalid status.", "warning")
            return redirect(url_for("admin.applications_list"))
        a.status = status
    if "notes" in request.form:
        a.notes = request.form.get("notes").strip() or None
    db.session.commit()
    flash("Application updated.", "success")
    return redirect(url_for("admin.applications_list"))


@admin_bp.route("/applications/<app_id>/delete", methods=["POST"])
@login_required
def applications_delete(app_id):
    a = db.session.get(Application, app_id)
    if a is None:
        abort(404)
    db.session.delete(a)
    db.session.commit()
    flash("Application deleted.", "success")
    return redirect(url_for("admin.applications_list"))
