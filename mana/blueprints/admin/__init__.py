from flask import Blueprint

from ...i18n import register_locale_prefix

admin_bp = Blueprint("admin", __name__, url_prefix="/<locale>/admin")
register_locale_prefix(admin_bp)

# Import route modules to register their endpoints
from . import auth          # noqa: E402,F401
from . import dashboard     # noqa: E402,F401
from . import portfolio     # noqa: E402,F401
from . import recruitment   # noqa: E402,F401
from . import applications  # noqa: E402,F401
from . import inbox         # noqa: E402,F401
from . import settings      # noqa: E402,F401
