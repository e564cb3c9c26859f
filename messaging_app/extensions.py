"""
Flask Extensions

Admins authenticate with bearer tokens only; the login manager never
stores identities in the cookie session.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_cors import CORS

# Database instance
db = SQLAlchemy()

# Resolves the admin identity from the Authorization header
login_manager = LoginManager()

cors = CORS()
