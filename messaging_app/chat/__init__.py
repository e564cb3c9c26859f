"""
Chat Blueprint

Session start and the message endpoints used by the anonymous client.
"""

from flask import Blueprint

chat_bp = Blueprint('chat', __name__)

from messaging_app.chat import routes  # noqa: E402, F401
