from flask import render_template, redirect, url_for, flash, abort, current_app
from sqlalchemy.exc import SQLAlchemyError

from ...extensions import db
from ...forms import ApplicationUploadForm
from ...i18n import translate as t
from ...models.careers import JobListing
from ...services.media_service import upload_file, UploadError
from ...services.submissions import create_application

from . import site_bp


@site_bp.route("/recruitment")
def recruitment():
    jobs = (JobListing.query
            .filter(JobListing.status == "PUBLISHED")
            .order_by(JobListing.created_at.desc())
            .all())
    return render_template("site/recruitment.html", jobs=jobs)


@site_bp.route("/recruitment/<job_id>", methods=["GET", "POST"])
def job_detail(job_id):
    job = db.session.get(JobListing, job_id)
    if job is None or not job.is_published:
        abort(404)

    form = ApplicationUploadForm()
    if form.validate_on_submit():
        cv = form.cv.data
        try:
            cv_url = upload_file(cv.stream, cv.filename)["url"]
        except UploadError as e:
            current_app.logger.error("CV upload failed: %s", e)
            flash(t("Recruitment.uploadFailed"), "danger")
            return render_template("site/job_detail.html", job=job, form=form)
        try:
            create_application(form, job_id=job.id, cv_url=cv_url)
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error("Application error: %s", e)
            flash(t("Recruitment.error"), "danger")
        else:
            flash(t("Recruitment.applied"), "success")
            return redirect(url_for("site.job_detail", job_id=job.id))
    return render_template("site/job_detail.html", job=job, form=form)
