from urllib.parse import parse_qs, urlencode, urlsplit

import pytest

from app import create_app
from extensions import db
from services.comment_service import CommentService
from services.post_service import PostService
from services.project_service import ProjectService
from services.user_service import UserService


def url(c=None, a=None, **params):
    query = {}
    if c is not None:
        query["c"] = c
    if a is not None:
        query["a"] = a
    query.update(params)
    return "/?" + urlencode(query) if query else "/"


def route_of(response):
    """(c, a, other query params) of a redirect's Location."""
    qs = parse_qs(urlsplit(response.headers["Location"]).query)
    flat = {k: v[0] for k, v in qs.items()}
    return flat.pop("c", None), flat.pop("a", None), flat


@pytest.fixture(scope="session")
def app():
    return create_app("testing")


@pytest.fixture(autouse=True)
def database(app):
    with app.app_context():
        db.drop_all()
        db.create_all()
    yield
    with app.app_context():
        db.session.remove()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    def _make(username="alice", password="secret123", email=None):
        with app.app_context():
            user = UserService.add_user(username, email or f"{username}@gestufas.pt", password)
            return user.user_id
    return _make


@pytest.fixture
def make_post(app):
    def _make(user_id, title="Hello World", content="This is a valid post body", tags=None):
        with app.app_context():
            return PostService().create_post(user_id=user_id, title=title, content=content, tags=tags).post_id
    return _make


@pytest.fixture
def make_comment(app):
    def _make(post_id, user_id, content="Nice post there"):
        with app.app_context():
            return CommentService.add(post_id=post_id, user_id=user_id, content=content).comment_id
    return _make


@pytest.fixture
def make_project(app):
    def _make(user_id, title="Greenhouse monitor", description="Sensors for the north greenhouse",
              status="active", technologies="python, flask"):
        with app.app_context():
            return ProjectService().create_project(
                user_id=user_id, title=title, description=description, technologies=technologies,
                repository_url=None, live_url=None, status=status,
            ).project_id
    return _make


@pytest.fixture
def login(client):
    def _login(username="alice", password="secret123"):
        return client.post(url("auth", "login"), data={"username": username, "password": password})
    return _login


@pytest.fixture
def alice(make_user, login):
    """alice exists and is logged in; returns her user id."""
    user_id = make_user("alice")
    login("alice")
    return user_id
