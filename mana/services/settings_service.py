# mana/services/settings_service.py
import logging
from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db
from ..models.settings import SiteSetting, SINGLETON_ID
from . import page_cache

log = logging.getLogger(__name__)

# rendered pages that read site settings
SETTINGS_PAGES = ("home", "contact")


def get_site_settings() -> SiteSetting:
    """Singleton settings row, created on first read."""
    settings = db.session.get(SiteSetting, SINGLETON_ID)
    if settings is None:
        settings = SiteSetting(id=SINGLETON_ID)
        db.session.add(settings)
        db.session.commit()
        log.info("Created site settings row")
    return settings


def load_site_settings() -> tuple[SiteSetting, bool]:
    """Settings for public pages, plus whether the built-in defaults stood in.

    Public pages keep rendering on the defaults when the DB is down.
    """
    try:
        return get_site_settings(), False
    except SQLAlchemyError as e:
        db.session.rollback()
        log.error("Error fetching site settings: %s", e)
        return SiteSetting.fallback(), True


def update_site_settings(data: dict) -> SiteSetting:
    settings = db.session.get(SiteSetting, SINGLETON_ID)
    if settings is None:
        settings = SiteSetting(id=SINGLETON_ID)
        db.session.add(settings)
    touched = settings.apply(data or {})
    db.session.commit()
    log.info("Site settings updated: %s", ", ".join(touched) or "(no fields)")
    page_cache.invalidate(*SETTINGS_PAGES)
    return settings
