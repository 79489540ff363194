# mana/models/inquiry.py
from datetime import datetime
from ..extensions import db
from ._base import new_id, iso

QUOTE_STATUSES = ("PENDING", "REVIEWED", "CONTACTED", "COMPLETED")
SERVICE_TYPES = ("Machining", "Repair", "Fabrication", "Modification", "Other")
URGENCY_LEVELS = ("Low", "Medium", "High", "Critical")


class QuoteRequest(db.Model):
    __tablename__ = "quote_request"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    first_name = db.Column(db.String(120), nullable=False)
    last_name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), nullable=False, index=True)
    company = db.Column(db.String(160))
    phone = db.Column(db.String(50), nullable=False)
    description = db.Column(db.Text, nullable=False)
    service_type = db.Column(db.String(40))
    urgency = db.Column(db.String(20))
    file_url = db.Column(db.String(500))
    status = db.Column(db.String(20), default="PENDING", nullable=False, index=True)  # PENDING|REVIEWED|CONTACTED|COMPLETED
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "company": self.company,
            "phone": self.phone,
            "description": self.description,
            "serviceType": self.service_type,
            "urgency": self.urgency,
            "fileUrl": self.file_url,
            "status": self.status,
            "createdAt": iso(self.created_at),
        }


class ContactMessage(db.Model):
    __tablename__ = "contact_message"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), nullable=False, index=True)
    subject = db.Column(db.String(200), nullable=False)
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "subject": self.subject,
            "message": self.message,
            "createdAt": iso(self.created_at),
        }
