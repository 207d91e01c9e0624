import jwt
import pytest

from teamgen import create_app
from teamgen.extensions import db


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_token():
    def _make(claims=None, key="not-checked-by-the-backend-0123456789"):
        return jwt.encode(claims if claims is not None else {"sub": "user-1"},
                          key, algorithm="HS256")
    return _make


@pytest.fixture
def auth(make_token):
    """Headers cho người dùng mặc định (user-1)."""
    def _headers(sub="user-1"):
        return {"Authorization": f"Bearer {make_token({'sub': sub})}"}
    return _headers
