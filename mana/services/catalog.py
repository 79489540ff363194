# mana/services/catalog.py
"""Admin-side writes for portfolio projects and job listings.

Input uses the JSON wire names; localized fields are normalized so they
always carry an "en" entry. Bad enum values raise ``ValueError``.
"""
import logging

from ..extensions import db
from ..i18n import normalize_localized
from ..models.careers import JobListing, JOB_STATUSES, JOB_TYPES
from ..models.portfolio import Project

log = logging.getLogger(__name__)

_JOB_TEXT = {
    "department": "department",
    "location": "location",
    "salaryRange": "salary_range",
}
_JOB_LOCALIZED = {"title": "title", "description": "description", "requirements": "requirements"}


def _text(value, label) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"Invalid {label}: expected text")
    return value.strip()


def _enum(value, allowed, label):
    value = _text(value, label).upper()
    if value not in allowed:
        raise ValueError(f"Invalid {label}: {value or '(empty)'}")
    return value


def job_changes(data: dict) -> dict:
    """Column values for the allowlisted job fields present in ``data``."""
    out = {}
    for key, column in _JOB_LOCALIZED.items():
        if key in data:
            out[column] = normalize_localized(data[key])
    for key, column in _JOB_TEXT.items():
        if key in data:
            out[column] = (str(data[key]).strip() if data[key] is not None else "") or None
    if "jobType" in data:
        out["job_type"] = _enum(data["jobType"], JOB_TYPES, "job type")
    if "status" in data:
        out["status"] = _enum(data["status"], JOB_STATUSES, "status")
    if "active" in data:
        out["status"] = "PUBLISHED" if data["active"] else "ARCHIVED"
    return out


def create_job(data: dict) -> JobListing:
    changes = job_changes({k: v for k, v in data.items() if k != "active"})
    if "status" not in changes:
        changes["status"] = "PUBLISHED" if data.get("active") else "DRAFT"
    changes.setdefault("title", normalize_localized(None))
    changes.setdefault("description", normalize_localized(None))
    changes.setdefault("requirements", normalize_localized(None))
    if not changes.get("location"):
        changes["location"] = "Workshop"
    changes.setdefault("job_type", "FULL_TIME")
    job = JobListing(**changes)
    db.session.add(job)
    db.session.commit()
    log.info("Job listing %s created (%s)", job.id, job.status)
    return job


def update_job(job: JobListing, data: dict) -> JobListing:
    for column, value in job_changes(data).items():
        setattr(job, column, value)
    db.session.commit()
    log.info("Job listing %s updated (%s)", job.id, job.status)
    return job


def create_project(data: dict) -> Project:
    project = Project(
        title=normalize_localized(data.get("title")),
        description=normalize_localized(data.get("description")),
        category=_text(data.get("category"), "category") or "Other",
        image_url=_text(data.get("imageUrl"), "imageUrl") or None,
        public_id=_text(data.get("publicId"), "publicId"),
    )
    db.session.add(project)
    db.session.commit()
    log.info("Project %s created in %s", project.id, project.category)
    return project
