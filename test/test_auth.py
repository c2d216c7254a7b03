import hashlib

import pytest

from conftest import route_of, url
from extensions import db
from models.posts import Posts
from models.users import Users


def test_register_creates_user_with_salted_hash(app, client):
    response = client.post(url("auth", "register"), data={
        "username": "alice", "email": "alice@gestufas.pt",
        "password": "secret123", "confirm_password": "secret123",
    })
    assert response.status_code == 302
    assert route_of(response)[:2] == ("auth", "login")
    with app.app_context():
        user = Users.query.filter_by(username="alice").one()
        assert user.password_hash != "secret123"
        assert user.password_hash != hashlib.md5(b"secret123").hexdigest()
        assert user.check_password("secret123")


def test_register_password_mismatch_rerenders_form(app, client):
    response = client.post(url("auth", "register"), data={
        "username": "alice", "email": "alice@gestufas.pt",
        "password": "secret123", "confirm_password": "other123",
    })
    assert response.status_code == 200
    assert b"Passwords do not match." in response.data
    assert b'value="alice"' in response.data
    with app.app_context():
        assert Users.query.count() == 0


def test_register_rejects_duplicate_username_and_email(client, make_user):
    make_user("alice")
    response = client.post(url("auth", "register"), data={
        "username": "alice", "email": "alice@gestufas.pt",
        "password": "secret123", "confirm_password": "secret123",
    })
    assert b"Username is already taken." in response.data
    assert b"Email is already registered." in response.data


def test_login_success_sets_session_and_redirects_home(client, make_user, login):
    make_user("alice", "secret123")
    response = login("alice", "secret123")
    assert response.status_code == 302
    assert route_of(response)[:2] == ("home", "index")
    # gated page is now reachable
    assert client.get(url("posts", "index")).status_code == 200


def test_login_wrong_password(client, make_user, login):
    make_user("alice", "secret123")
    response = login("alice", "wrong-password")
    assert response.status_code == 302
    assert route_of(response)[:2] == ("auth", "login")

    page = client.get(url("auth", "login"))
    assert b"Invalid credentials." in page.data
    gated = client.get(url("posts", "index"))
    assert route_of(gated)[:2] == ("auth", "login")


def test_login_unknown_user(client, login):
    response = login("ghost", "whatever")
    assert route_of(response)[:2] == ("auth", "login")


def test_logout_clears_session(client, alice):
    response = client.get(url("auth", "logout"))
    assert route_of(response)[:2] == ("auth", "login")
    assert route_of(client.get(url("posts", "index")))[:2] == ("auth", "login")


@pytest.mark.parametrize("c,a", [
    ("posts", "index"), ("posts", "show"), ("posts", "create"),
    ("projects", "index"), ("projects", "create"), ("projects", "join"),
    ("users", "index"), ("community", "index"), ("profile", "index"),
    ("home", "dashboard"), ("api", "stats"),
])
def test_gated_get_redirects_anonymous_to_login(client, c, a):
    response = client.get(url(c, a, id=1))
    assert response.status_code == 302
    assert route_of(response)[:2] == ("auth", "login")


def test_gated_post_has_no_side_effects(app, client, make_user):
    make_user("alice")
    response = client.post(url("posts", "store"), data={
        "title": "Hello World", "content": "This is a valid post body",
    })
    assert route_of(response)[:2] == ("auth", "login")
    with app.app_context():
        assert db.session.query(Posts).count() == 0


def test_logged_in_user_skips_login_form(client, alice):
    response = client.get(url("auth", "login"))
    assert route_of(response)[:2] == ("home", "index")
