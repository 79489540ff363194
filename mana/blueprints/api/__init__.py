from flask import Blueprint

api_bp = Blueprint("api", __name__)

# Import route modules to register their endpoints
from . import auth      # noqa: E402,F401
from . import public    # noqa: E402,F401
from . import admin     # noqa: E402,F401
