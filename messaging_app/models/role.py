"""
Sender Role
"""

import enum


class Role(str, enum.Enum):
    """Closed set of parties that can author a message."""
    USER = 'user'
    ADMIN = 'admin'

    @classmethod
    def from_claim(cls, value):
        """Return the matching role, or None for anything unrecognised."""
        try:
            return cls(value)
        except ValueError:
            return None
