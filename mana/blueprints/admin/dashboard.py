from flask import render_template
from flask_login import login_required

from ...models.careers import Application, JobListing
from ...models.inquiry import ContactMessage, QuoteRequest
from ...models.portfolio import Project
from . import admin_bp


@admin_bp.route("/")
@login_required
def dashboard():
    stats = {
        "projects": Project.query.count(),
        "pending_quotes": QuoteRequest.query.filter_by(status="PENDING").count(),
        "published_jobs": JobListing.query.filter_by(status="PUBLISHED").count(),
        "new_applications": Application.query.filter_by(status="NEW").count(),
        "messages": ContactMessage.query.count(),
    }
    latest_quotes = QuoteRequest.query.order_by(QuoteRequest.created_at.desc()).limit(5).all()
    return render_template("admin/dashboard.html", stats=stats, latest_quotes=latest_quotes)
