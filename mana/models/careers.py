from datetime import datetime
from ..extensions import db
from ._base import new_id, iso

JOB_STATUSES = ("DRAFT", "PUBLISHED", "ARCHIVED")
JOB_TYPES = ("FULL_TIME", "PART_TIME", "CONTRACT", "INTERNSHIP")
APPLICATION_STATUSES = ("NEW", "IN_REVIEW", "INTERVIEW", "OFFER", "HIRED", "REJECTED")


class JobListing(db.Model):
    __tablename__ = "job_listing"
    id = db.Column(db.String(32), primary_key=True, default=new_id)
    title = db.Column(db.JSON, nullable=False)            # localized
    description = db.Column(db.JSON, nullable=False, default=dict)
    requirements = db.Column(db.JSON, nullable=False, default=dict)
    department = db.Column(db.String(120), nullable=True)
    location = db.Column(db.String(120), nullable=False, default="Workshop")
    job_type = db.Column(db.String(20), nullable=False, default="FULL_TIME")
    salary_range = db.Column(db.String(120), nullable=True)
    status = db.Column(db.String(20), nullable=False, default="DRAFT", index=True)  # DRAFT|PUBLISHED|ARCHIVED
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    @property
    def is_published(self) -> bool:
        return self.status == "PUBLISHED"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "requirements": self.requirements,
            "department": self.department,
            "location": self.location,
            "jobType": self.job_type,
            "salaryRange": self.salary_range,
            "status": self.status,
            "active": self.is_published,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }


class Application(db.Model):
    __tablename__ = "application"
    id = db.Column(db.String(32), primary_key=True, default=new_id)
    # no cascade: deleting a job leaves its applications behind
    job_id = db.Column(db.String(32), db.ForeignKey("job_listing.id"), nullable=False, index=True)
    job = db.relationship("JobListing", backref=db.backref("applications", lazy="dynamic", passive_deletes="all"))
    full_name = db.Column(db.String(160), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(80), nullable=False)
    cv_url = db.Column(db.String(500), nullable=False)
    message = db.Column(db.Text, nullable=True)
    status = db.Column(db.String(20), nullable=False, default="NEW", index=True)
    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    def to_dict(self, with_job: bool = False) -> dict:
        out = {
            "id": self.id,
            "jobId": self.job_id,
            "fullName": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "cvUrl": self.cv_url,
            "message": self.message,
            "status": self.status,
            "notes": self.notes,
            "createdAt": iso(self.created_at),
        }
        if with_job:
            out["job"] = self.job.to_dict() if self.job else None
        return out
