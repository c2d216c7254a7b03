# controllers/__init__.py
from flask import Blueprint, Flask, current_app

from framework.context import RequestContext
from framework.router import Dispatcher

front_bp = Blueprint("front", __name__)


@front_bp.route("/", methods=["GET", "POST"])
def dispatch():
    return current_app.extensions["dispatcher"].dispatch(RequestContext.from_flask())


def register_blueprints(app: Flask):
    from routes import ROUTES

    app.extensions["dispatcher"] = Dispatcher(ROUTES)
    # single entry point: every page is /?c=<resource>&a=<action>
    app.register_blueprint(front_bp)
