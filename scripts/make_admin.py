"""Create an admin account, or reset its password if it already exists.

Usage: python scripts/make_admin.py <username> <password>
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from messaging_app import create_app
from messaging_app.services.admins import create_admin

if len(sys.argv) != 3:
    print(__doc__)
    sys.exit(1)

username, password = sys.argv[1], sys.argv[2]

app = create_app()
with app.app_context():
    admin = create_admin(username, password)
    print(f"Admin {admin.username} ready (adminId={admin.admin_id})")
