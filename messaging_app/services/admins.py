"""
Admin Directory

Lookup and seeding of admin accounts. Accounts are created out of band
(start-up seeding or scripts/make_admin.py), never over HTTP.
"""

import logging

from messaging_app.extensions import db
from messaging_app.models import Admin

logger = logging.getLogger(__name__)


def authenticate(username, password):
    """Return the admin matching the credentials, or None."""
    admin = Admin.query.filter_by(username=username).first()
    if admin and admin.check_password(password):
        return admin
    return None


def create_admin(username, password):
    """Create ``username`` or reset its password if it already exists."""
    admin = Admin.query.filter_by(username=username).first()
    if admin is None:
        admin = Admin(username=username)
        db.session.add(admin)
        logger.info('Created admin %s', username)
    else:
        logger.info('Updated password for admin %s', username)
    admin.set_password(password)
    db.session.commit()
    return admin


def list_admins():
    return Admin.query.order_by(Admin.admin_id).all()
