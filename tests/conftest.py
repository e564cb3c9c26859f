import pytest

from messaging_app import create_app
from messaging_app.config import TestConfig
from messaging_app.extensions import db
from messaging_app.models import Admin, Role
from messaging_app.services import create_admin, issue_token


@pytest.fixture()
def app():
    """A fresh application; no app context stays pushed, so every client
    request gets its own context (and its own current_user)."""
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def ctx(app):
    """App context for tests that call services directly."""
    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin(app):
    """The admin seeded from TestConfig at start-up."""
    with app.app_context():
        return Admin.query.filter_by(username=TestConfig.ADMIN_USERNAME).one()


@pytest.fixture()
def second_admin(app):
    with app.app_context():
        bob = create_admin('bob', 'bobpass')
        bob.admin_id  # load attributes before the session goes away
        return bob


@pytest.fixture()
def make_token(app):
    def _make(username, admin_id, role=Role.ADMIN, expires_in=None):
        with app.app_context():
            return issue_token(username, admin_id, role, expires_in)
    return _make


@pytest.fixture()
def admin_token(admin, make_token):
    return make_token(admin.username, admin.admin_id)


@pytest.fixture()
def auth_headers(admin_token):
    return {'Authorization': f'Bearer {admin_token}'}


@pytest.fixture()
def session_id(client):
    r = client.post('/api/session')
    assert r.status_code == 200
    return r.get_json()['sessionId']
