# Admin JSON endpoints; the admin gate runs before any of these.
from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from ...extensions import db
from ...models.careers import Application, JobListing, APPLICATION_STATUSES
from ...models.inquiry import ContactMessage, QuoteRequest, QUOTE_STATUSES
from ...models.portfolio import Project
from ...services.catalog import create_job, update_job, create_project
from ...services.settings_service import get_site_settings, update_site_settings
from . import api_bp
from .utils import json_body, bad_request, failure, get_or_none


def _delete(model, label):
    data = json_body() or {}
    obj = get_or_none(model, data.get("id"))
    if obj is None:
        return failure(f"Failed to delete {label}", status=404)
    try:
        db.session.delete(obj)
        db.session.commit()
    except SQLAlchemyError as e:
        return failure(f"Failed to delete {label}", e)
    return jsonify({"success": True})


# ---- Applications ----
@api_bp.get("/admin/applications")
def admin_applications():
    try:
        apps = (Application.query
                .options(joinedload(Application.job))
                .order_by(Application.created_at.desc())
                .all())
    except SQLAlchemyError as e:
        return failure("Failed to fetch applications", e)
    return jsonify([a.to_dict(with_job=True) for a in apps])


@api_bp.patch("/admin/applications")
def admin_application_update():
    data = json_body() or {}
    a = get_or_none(Application, data.get("id"))
    if a is None:
        return failure("Failed to update application status", status=404)
    status = data.get("status")
    if status:
        if status not in APPLICATION_STATUSES:
            return bad_request(f"Invalid status: {status}")
        a.status = status
    if "notes" in data:
        a.notes = data["notes"]
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        return failure("Failed to update application status", e)
    return jsonify(a.to_dict())


@api_bp.delete("/admin/applications")
def admin_application_delete():
    return _delete(Application, "application")


# ---- Jobs ----
@api_bp.get("/admin/jobs")
def admin_jobs():
    try:
        jobs = JobListing.query.order_by(JobListing.created_at.desc()).all()
    except SQLAlchemyError as e:
        return failure("Failed to fetch jobs", e)
    return jsonify([j.to_dict() for j in jobs])


@api_bp.post("/admin/jobs")
def admin_job_create():
    data = json_body()
    if data is None:
        return bad_request("Invalid request body")
    try:
        job = create_job(data)
    except ValueError as e:
        return bad_request(str(e))
    except SQLAlchemyError as e:
        return failure("Failed to create job listing", e)
    return jsonify(job.to_dict())


@api_bp.patch("/admin/jobs")
def admin_job_update():
    data = json_body() or {}
    job = get_or_none(JobListing, data.get("id"))
    if job is None:
        return failure("Failed to update job listing", status=404)
    try:
        update_job(job, data)
    except ValueError as e:
        db.session.rollback()
        return bad_request(str(e))
    except SQLAlchemyError as e:
        return failure("Failed to update job listing", e)
    return jsonify(job.to_dict())


@api_bp.delete("/admin/jobs")
def admin_job_delete():
    return _delete(JobListing, "job listing")


# ---- Portfolio ----
@api_bp.get("/admin/portfolio")
def admin_projects():
    try:
        projects = Project.query.order_by(Project.created_at.desc()).all()
    except SQLAlchemyError as e:
        return failure("Failed to fetch projects", e)
    return jsonify([p.to_dict() for p in projects])


@api_bp.post("/admin/portfolio")
def admin_project_create():
    data = json_body()
    if data is None:
        return bad_request("Invalid request body")
    try:
        project = create_project(data)
    except ValueError as e:
        return bad_request(str(e))
    except SQLAlchemyError as e:
        return failure("Failed to create project", e)
    return jsonify(project.to_dict())


@api_bp.delete("/admin/portfolio")
def admin_project_delete():
    return _delete(Project, "project")


# ---- Quotes ----
@api_bp.get("/admin/quotes")
def admin_quotes():
    try:
        quotes = QuoteRequest.query.order_by(QuoteRequest.created_at.desc()).all()
    except SQLAlchemyError as e:
        return failure("Failed to fetch quotes", e)
    return jsonify([q.to_dict() for q in quotes])


@api_bp.patch("/admin/quotes")
def admin_quote_update():
    data = json_body() or {}
    q = get_or_none(QuoteRequest, data.get("id"))
    if q is None:
        return failure("Failed to update quote status", status=404)
    status = data.get("status")
    if status not in QUOTE_STATUSES:
        return bad_request(f"Invalid status: {status}")
    q.status = status
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        return failure("Failed to update quote status", e)
    return jsonify(q.to_dict())


@api_bp.delete("/admin/quotes")
def admin_quote_delete():
    return _delete(QuoteRequest, "quote")


# ---- Messages ----
@api_bp.get("/admin/messages")
def admin_messages():
    try:
        messages = ContactMessage.query.order_by(ContactMessage.created_at.desc()).all()
    except SQLAlchemyError as e:
        return failure("Failed to fetch messages", e)
    return jsonify([m.to_dict() for m in messages])


@api_bp.delete("/admin/messages")
def admin_message_delete():
    return _delete(ContactMessage, "message")


# ---- Settings ----
@api_bp.get("/admin/settings")
def admin_settings():
    try:
        settings = get_site_settings()
    except SQLAlchemyError as e:
        return failure("Failed to fetch settings", e)
    return jsonify(settings.to_dict())


@api_bp.patch("/admin/settings")
def admin_settings_update():
    data = json_body()
    if data is None:
        return bad_request("Invalid request body")
    try:
        settings = update_site_settings(data)
    except SQLAlchemyError as e:
        db.session.rollback()
        return jsonify({"error": "Failed to update settings", "details": str(e)}), 500
    return jsonify(settings.to_dict())
