"""
Admin Blueprint

Login plus the routes reserved to authenticated admins.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from messaging_app.admin import routes  # noqa: E402, F401
