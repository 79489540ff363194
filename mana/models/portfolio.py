from datetime import datetime
from ..extensions import db
from ._base import new_id, iso


class Project(db.Model):
    __tablename__ = "project"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    title = db.Column(db.JSON, nullable=False)          # {"en": ..., "fr": ..., "ar": ...}
    description = db.Column(db.JSON, nullable=False, default=dict)
    category = db.Column(db.String(80), nullable=False, default="Other", index=True)
    image_url = db.Column(db.String(500))
    public_id = db.Column(db.String(255), default="")   # media-host id
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "imageUrl": self.image_url,
            "publicId": self.public_id,
            "createdAt": iso(self.created_at),
        }
