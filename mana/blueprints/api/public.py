from flask import current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from ...forms import ContactForm, QuoteForm, ApplicationForm
from ...models.careers import JobListing
from ...services.media_service import upload_file, UploadError
from ...services.submissions import create_contact_message, create_quote_request, create_application
from . import api_bp
from .utils import json_body, json_formdata, bad_request, validation_failed, failure, get_or_none


@api_bp.post("/contact")
def contact():
    data = json_body()
    if data is None:
        return bad_request("Invalid request body")
    form = ContactForm(formdata=json_formdata(data), meta={"csrf": False})
    if not form.validate():
        return validation_failed(form)
    try:
        msg = create_contact_message(form)
    except SQLAlchemyError as e:
        return failure("Failed to send message", e)
    return jsonify({"success": True, "id": msg.id})


@api_bp.post("/quote")
def quote():
    data = json_body()
    if data is None:
        return bad_request("Invalid request body")
    form = QuoteForm(formdata=json_formdata(data), meta={"csrf": False})
    if not form.validate():
        return validation_failed(form)
    try:
        q = create_quote_request(form)
    except SQLAlchemyError as e:
        return failure("Failed to submit quote request", e)
    return jsonify({"success": True, "id": q.id})


@api_bp.post("/apply")
def apply():
    data = json_body()
    if data is None:
        return bad_request("Invalid request body")
    form = ApplicationForm(formdata=json_formdata(data), meta={"csrf": False})
    if not form.validate():
        return validation_failed(form)
    try:
        job = get_or_none(JobListing, form.jobId.data)
        if job is None:
            return bad_request("Validation failed", fields={"jobId": ["Please select a position"]})
        app_ = create_application(form, job_id=job.id, cv_url=form.cvUrl.data.strip())
    except SQLAlchemyError as e:
        return failure("Failed to submit application", e)
    return jsonify({"success": True, "id": app_.id})


@api_bp.get("/jobs")
def published_jobs():
    try:
        jobs = (JobListing.query
                .filter(JobListing.status == "PUBLISHED")
                .order_by(JobListing.created_at.desc())
                .all())
    except SQLAlchemyError as e:
        return failure("Failed to fetch jobs", e)
    return jsonify([j.to_dict() for j in jobs])


@api_bp.post("/upload")
def upload():
    f = request.files.get("file")
    if not f or not f.filename:
        return jsonify({"error": "No file received."}), 400
    try:
        result = upload_file(f.stream, f.filename)
    except UploadError as e:
        current_app.logger.error("Upload error: %s", e)
        return jsonify({"error": str(e) or "Upload failed."}), 500
    return jsonify({"success": True, "url": result["url"], "publicId": result["publicId"]})
