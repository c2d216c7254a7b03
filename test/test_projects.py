import pytest
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError

from conftest import route_of, url
from extensions import db
from models.projects import Projects

VALID = {
    "title": "Greenhouse monitor",
    "description": "Sensors for the north greenhouse",
    "technologies": "python, flask",
    "repository_url": "https://example.com/greenhouse.git",
    "live_url": "",
    "status": "active",
}


def project_count(app):
    with app.app_context():
        return db.session.query(Projects).count()


def test_store_valid_project(app, client, alice):
    response = client.post(url("projects", "store"), data=VALID)
    c, a, params = route_of(response)
    assert (c, a) == ("projects", "show")
    with app.app_context():
        project = db.session.get(Projects, int(params["id"]))
        assert project.user_id == alice
        assert project.live_url is None
        assert project.technology_list == ["python", "flask"]


def test_invalid_repository_url_is_rejected(app, client, alice):
    response = client.post(url("projects", "store"), data=dict(VALID, repository_url="not a url"))
    assert response.status_code == 200
    assert b"Invalid repository URL." in response.data
    assert project_count(app) == 0


def test_invalid_status_is_rejected(app, client, alice):
    response = client.post(url("projects", "store"), data=dict(VALID, status="abandoned"))
    assert response.status_code == 200
    assert b"Invalid status." in response.data
    assert project_count(app) == 0


def test_missing_status_defaults_to_active(app, client, alice):
    data = dict(VALID)
    del data["status"]
    response = client.post(url("projects", "store"), data=data)
    _, _, params = route_of(response)
    with app.app_context():
        assert db.session.get(Projects, int(params["id"])).status == "active"


def test_index_filters_by_status_and_search(client, alice, make_project):
    make_project(alice, title="Tomato sensors", status="active")
    make_project(alice, title="Old irrigation", status="completed")
    make_project(alice, title="Paused lighting", description="LED grow lights for winter", status="on_hold")

    page = client.get(url("projects", "index", status="completed")).data
    assert b"Old irrigation" in page
    assert b"Tomato sensors" not in page

    page = client.get(url("projects", "index", search="grow lights")).data
    assert b"Paused lighting" in page
    assert b"Old irrigation" not in page

    # unknown status is ignored
    page = client.get(url("projects", "index", status="bogus")).data
    assert b"Tomato sensors" in page and b"Old irrigation" in page


def test_show_reports_single_member(client, alice, make_project):
    project_id = make_project(alice)
    page = client.get(url("projects", "show", id=project_id))
    assert page.status_code == 200
    assert b"Members: 1 (alice)" in page.data


def test_owner_can_update(app, client, alice, make_project):
    project_id = make_project(alice)
    response = client.post(url("projects", "update", id=project_id), data=dict(VALID, status="completed"))
    assert route_of(response) == ("projects", "show", {"id": str(project_id)})
    with app.app_context():
        assert db.session.get(Projects, project_id).status == "completed"


def test_non_owner_cannot_update_or_delete(app, client, make_user, make_project, login):
    bob = make_user("bob")
    project_id = make_project(bob)
    make_user("alice")
    login("alice")

    response = client.post(url("projects", "update", id=project_id), data=dict(VALID, title="Taken over"))
    assert route_of(response)[:2] == ("projects", "show")
    response = client.post(url("projects", "delete", id=project_id))
    assert route_of(response)[:2] == ("projects", "show")
    with app.app_context():
        assert db.session.get(Projects, project_id).title == "Greenhouse monitor"


def test_owner_can_delete(app, client, alice, make_project):
    project_id = make_project(alice)
    response = client.post(url("projects", "delete", id=project_id))
    assert route_of(response)[:2] == ("projects", "index")
    assert project_count(app) == 0


@pytest.mark.parametrize("action,message", [
    ("join", b"Joining projects is not available yet."),
    ("leave", b"Leaving projects is not available yet."),
])
def test_membership_actions_are_informational(client, alice, make_project, action, message):
    project_id = make_project(alice)
    response = client.get(url("projects", action, id=project_id))
    assert route_of(response) == ("projects", "show", {"id": str(project_id)})
    assert message in client.get(url("projects", "show", id=project_id)).data


def test_store_failure_rerenders_form_with_values(app, client, alice):
    def refuse(mapper, connection, target):
        raise SQLAlchemyError("disk full")

    event.listen(Projects, "before_insert", refuse)
    try:
        response = client.post(url("projects", "store"), data=VALID)
    finally:
        event.remove(Projects, "before_insert", refuse)
    assert response.status_code == 200
    assert b"Could not save the project. Please try again." in response.data
    assert b'value="Greenhouse monitor"' in response.data
    assert project_count(app) == 0
