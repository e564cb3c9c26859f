"""
Models Package

Exports all models for easy importing.
"""

from messaging_app.models.role import Role
from messaging_app.models.admin import Admin
from messaging_app.models.session import ChatSession
from messaging_app.models.message import Message

__all__ = ['Role', 'Admin', 'ChatSession', 'Message']
