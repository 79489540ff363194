# mana/models/user.py
from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash
from flask_login import UserMixin
from ..extensions import db
from ._base import new_id


class User(UserMixin, db.Model):
    __tablename__ = "user"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    name = db.Column(db.String(120))
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    # ADMIN is the only role the admin gate accepts
    role = db.Column(db.String(20), nullable=False, default="ADMIN", index=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    # --- Auth helpers ---
    def set_password(self, password: str):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    @property
    def is_admin(self) -> bool:
        return self.role == "ADMIN"

    def public_dict(self) -> dict:
        return {"name": self.name, "email": self.email, "role": self.role}
