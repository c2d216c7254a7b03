import subprocess
import sys
from pathlib import Path

import pytest
from werkzeug.exceptions import MethodNotAllowed, NotFound

from conftest import url
from framework.context import RequestContext, SessionContext
from framework.controller import Controller
from framework.router import GET, GET_POST, POST, Dispatcher, Route, RouteConfigurationError, RouteTable
from routes import ROUTES


class SpyController(Controller):
    resource = "spy"
    instances = 0

    def __init__(self, ctx):
        SpyController.instances += 1
        super().__init__(ctx)

    def ping(self):
        return "pong"

    def explode(self):
        raise RuntimeError("boom")


@pytest.fixture
def spy_table():
    SpyController.instances = 0
    return RouteTable(
        default=Route(GET, SpyController, "ping"),
        routes={"spy": {
            "ping": Route(GET_POST, SpyController, "ping"),
            "store": Route(POST, SpyController, "ping"),
            "explode": Route(GET, SpyController, "explode"),
        }},
    )


def make_ctx(method="GET", **args):
    return RequestContext(method=method, args=args, form={}, session=SessionContext({}, None))


def test_default_route_when_no_params(app, spy_table):
    with app.test_request_context():
        assert Dispatcher(spy_table).dispatch(make_ctx()) == "pong"


def test_lookup_by_resource_and_action(app, spy_table):
    with app.test_request_context():
        assert Dispatcher(spy_table).dispatch(make_ctx("POST", c="spy", a="ping")) == "pong"


@pytest.mark.parametrize("args", [
    {"c": "spy", "a": "missing"},
    {"c": "nope", "a": "ping"},
    {"c": "spy"},
    {"a": "ping"},
])
def test_unknown_route_is_not_found_and_no_controller_is_built(app, spy_table, args):
    with app.test_request_context():
        with pytest.raises(NotFound):
            Dispatcher(spy_table).dispatch(make_ctx(**args))
    assert SpyController.instances == 0


def test_disallowed_method(app, spy_table):
    with app.test_request_context():
        with pytest.raises(MethodNotAllowed) as excinfo:
            Dispatcher(spy_table).dispatch(make_ctx("GET", c="spy", a="store"))
    assert excinfo.value.valid_methods == ["POST"]
    assert SpyController.instances == 0


def test_head_is_allowed_where_get_is():
    assert Route(GET, SpyController, "ping").allows("HEAD")
    assert not Route(POST, SpyController, "ping").allows("HEAD")


def test_missing_controller_is_a_configuration_error(app):
    table = RouteTable(default=Route(GET, object, "ping"), routes={})
    with app.test_request_context():
        with pytest.raises(RouteConfigurationError):
            Dispatcher(table).dispatch(make_ctx())


def test_missing_action_is_a_configuration_error(app):
    table = RouteTable(default=Route(GET, SpyController, "nope"), routes={})
    with app.test_request_context():
        with pytest.raises(RouteConfigurationError):
            Dispatcher(table).dispatch(make_ctx())


def test_validate_rejects_broken_tables():
    broken = RouteTable(
        default=Route(GET, SpyController, "ping"),
        routes={"spy": {"gone": Route(GET, SpyController, "gone")}},
    )
    with pytest.raises(RouteConfigurationError, match="gone"):
        broken.validate()


def test_application_route_table_is_valid():
    ROUTES.validate()


@pytest.mark.parametrize("module", ["routes", "controllers", "app"])
def test_modules_import_on_their_own(module):
    # fresh interpreter so import order is not inherited from this session
    result = subprocess.run([sys.executable, "-c", f"import {module}"],
                            cwd=Path(__file__).resolve().parents[1], capture_output=True, text=True)
    assert result.returncode == 0, result.stderr


def test_unexpected_failure_becomes_flash_redirect(app, spy_table, caplog):
    with app.test_request_context():
        response = Dispatcher(spy_table).dispatch(make_ctx("GET", c="spy", a="explode"))
    assert response.status_code == 302
    assert "SpyController.explode failed" in caplog.text


# ---- through the HTTP front controller ----

def test_http_unknown_route_is_404(client):
    assert client.get(url("posts", "nope")).status_code == 404
    assert client.get(url("nothing", "index")).status_code == 404


def test_http_get_on_post_only_route_is_405(client, alice):
    response = client.get(url("posts", "store"))
    assert response.status_code == 405
    assert "POST" in response.headers["Allow"]


def test_http_default_route_renders_home(client):
    response = client.get("/")
    assert response.status_code == 200
    assert b"Welcome to GEstufas" in response.data
