from flask import render_template, redirect, url_for, flash, abort, current_app, request
from flask_login import login_required
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from ...extensions import db
from ...models.careers import Application, JobListing, JOB_TYPES
from ...services.catalog import create_job, update_job
from . import admin_bp
from .utils import form_text, form_localized


@admin_bp.route("/recruitment")
@login_required
def recruitment_list():
    jobs = JobListing.query.order_by(JobListing.created_at.desc()).all()
    counts = dict(
        db.session.query(Application.job_id, func.count(Application.id))
        .group_by(Application.job_id)
        .all()
    )
    return render_template("admin/recruitment.html", jobs=jobs, counts=counts, job_types=JOB_TYPES)


@admin_bp.route("/recruitment/new", methods=["POST"])
@login_required
def recruitment_new():
    title = form_localized("title")
    if not title.get("en"):
        flash("English title required.", "warning")
        return redirect(url_for("admin.recruitment_list"))
    try:
        create_job({
            "title": title,
            "description": form_localized("description"),
            "requirements": form_localized("requirements"),
            "department": form_text("department"),
            "location": form_text("location"),
            "jobType": form_text("jobType") or "FULL_TIME",
            "salaryRange": form_text("salaryRange"),
            "active": request.form.get("active") == "on",
        })
    except ValueError as e:
        flash(str(e), "warning")
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error("Job create failed: %s", e)
        flash("Failed to create job listing.", "danger")
    else:
        flash("Job listing created.", "success")
    return redirect(url_for("admin.recruitment_list"))


@admin_bp.route("/recruitment/<job_id>/toggle", methods=["POST"])
@login_required
def recruitment_toggle(job_id):
    job = db.session.get(JobListing, job_id)
    if job is None:
        abort(404)
    update_job(job, {"active": not job.is_published})
    flash("Visibility updated.", "success")
    return redirect(url_for("admin.recruitment_list"))


@admin_bp.route("/recruitment/<job_id>/delete", methods=["POST"])
@login_required
def recruitment_delete(job_id):
    job = db.session.get(JobListing, job_id)
    if job is None:
        abort(404)
    db.session.delete(job)
    db.session.commit()
    flash("Job listing deleted.", "success")
    return redirect(url_for("admin.recruitment_list"))
