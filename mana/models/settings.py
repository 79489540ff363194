# mana/models/settings.py
from datetime import datetime
from ..extensions import db

SINGLETON_ID = "singleton"

DEFAULT_HOURS = {
    "business_hours_mon": "08:00 - 18:00",
    "business_hours_tue": "08:00 - 18:00",
    "business_hours_wed": "08:00 - 18:00",
    "business_hours_thu": "08:00 - 18:00",
    "business_hours_fri": "08:00 - 18:00",
    "business_hours_sat": "09:00 - 13:00",
    "business_hours_sun": "Closed",
}

# wire name -> column; the only fields an admin update may write
EDITABLE_FIELDS = {
    "siteName": "site_name",
    "address": "address",
    "email": "email",
    "phone": "phone",
    "whatsapp": "whatsapp",
    "facebook": "facebook",
    "linkedin": "linkedin",
    "instagram": "instagram",
    "logoUrl": "logo_url",
    "heroImageUrl": "hero_image_url",
    "introImageUrl": "intro_image_url",
    "portfolioProject1Url": "portfolio_project1_url",
    "portfolioProject2Url": "portfolio_project2_url",
    "portfolioProject3Url": "portfolio_project3_url",
    "servicesMachiningUrl": "services_machining_url",
    "servicesRepairUrl": "services_repair_url",
    "servicesFabricationUrl": "services_fabrication_url",
    "servicesModificationUrl": "services_modification_url",
    "servicesManufacturingUrl": "services_manufacturing_url",
    "servicesRestorationUrl": "services_restoration_url",
    "servicesGuidanceUrl": "services_guidance_url",
    "aboutStoryUrl": "about_story_url",
    "aboutVisualBreakUrl": "about_visual_break_url",
    "businessHoursMon": "business_hours_mon",
    "businessHoursTue": "business_hours_tue",
    "businessHoursWed": "business_hours_wed",
    "businessHoursThu": "business_hours_thu",
    "businessHoursFri": "business_hours_fri",
    "businessHoursSat": "business_hours_sat",
    "businessHoursSun": "business_hours_sun",
}


class SiteSetting(db.Model):
    __tablename__ = "site_setting"

    id = db.Column(db.String(32), primary_key=True, default=SINGLETON_ID)

    # Identity / contact channels
    site_name = db.Column(db.String(120), default="MANA")
    address = db.Column(db.String(255), default="123 Industrial Zone, Agricultural District")
    email = db.Column(db.String(255), default="contact@manaworkshops.com")
    phone = db.Column(db.String(50), default="+1 (234) 567-890")
    whatsapp = db.Column(db.String(50))
    facebook = db.Column(db.String(500))
    linkedin = db.Column(db.String(500))
    instagram = db.Column(db.String(500))

    # Page media
    logo_url = db.Column(db.String(500))
    hero_image_url = db.Column(db.String(500))
    intro_image_url = db.Column(db.String(500))
    portfolio_project1_url = db.Column(db.String(500))
    portfolio_project2_url = db.Column(db.String(500))
    portfolio_project3_url = db.Column(db.String(500))
    services_machining_url = db.Column(db.String(500))
    services_repair_url = db.Column(db.String(500))
    services_fabrication_url = db.Column(db.String(500))
    services_modification_url = db.Column(db.String(500))
    services_manufacturing_url = db.Column(db.String(500))
    services_restoration_url = db.Column(db.String(500))
    services_guidance_url = db.Column(db.String(500))
    about_story_url = db.Column(db.String(500))
    about_visual_break_url = db.Column(db.String(500))

    # Weekly hours, free text ("08:00 - 18:00", "Closed")
    business_hours_mon = db.Column(db.String(40), default=DEFAULT_HOURS["business_hours_mon"])
    business_hours_tue = db.Column(db.String(40), default=DEFAULT_HOURS["business_hours_tue"])
    business_hours_wed = db.Column(db.String(40), default=DEFAULT_HOURS["business_hours_wed"])
    business_hours_thu = db.Column(db.String(40), default=DEFAULT_HOURS["business_hours_thu"])
    business_hours_fri = db.Column(db.String(40), default=DEFAULT_HOURS["business_hours_fri"])
    business_hours_sat = db.Column(db.String(40), default=DEFAULT_HOURS["business_hours_sat"])
    business_hours_sun = db.Column(db.String(40), default=DEFAULT_HOURS["business_hours_sun"])

    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def apply(self, data: dict) -> list[str]:
        """Write allowlisted wire fields from ``data``; returns the fields touched."""
        touched = []
        for key, column in EDITABLE_FIELDS.items():
            if key in data:
                value = data[key]
                if isinstance(value, str):
                    value = value.strip() or None
                setattr(self, column, value)
                touched.append(key)
        return touched

    def to_dict(self) -> dict:
        out = {"id": self.id}
        for key, column in EDITABLE_FIELDS.items():
            out[key] = getattr(self, column)
        out["updatedAt"] = self.updated_at.isoformat() + "Z" if self.updated_at else None
        return out

    @classmethod
    def fallback(cls) -> "SiteSetting":
        """Transient row with the built-in defaults, never added to the session."""
        return cls(
            id=SINGLETON_ID,
            site_name="MANA",
            address="123 Industrial Zone, Agricultural District",
            email="contact@manaworkshops.com",
            phone="+1 (234) 567-890",
            **DEFAULT_HOURS,
        )
