from flask import Blueprint

from ...i18n import register_locale_prefix

site_bp = Blueprint("site", __name__, url_prefix="/<locale>")
register_locale_prefix(site_bp)

from . import routes     # noqa: E402,F401
from . import careers    # noqa: E402,F401
