import logging
import os
from logging.handlers import RotatingFileHandler

from flask import Flask, render_template, request
from flask_login import LoginManager
from flask_wtf.csrf import generate_csrf

from config import config_by_name
from extensions import db, csrf, migrate
from extensions import server_session as session_ext
from controllers import register_blueprints
from framework.urls import route_url
from models import load_models
from routes import ROUTES


LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def configure_logging(app: Flask) -> None:
    """Send app.logger to logs/application.log (rotated) at the configured level."""
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    app.logger.setLevel(level)

    log_dir = app.config.get("LOG_DIR")
    if not log_dir:
        return
    os.makedirs(log_dir, exist_ok=True)
    handler = RotatingFileHandler(
        os.path.join(log_dir, "application.log"),
        maxBytes=1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    app.logger.addHandler(handler)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def not_found(e):
        app.logger.info("route not found: c=%s a=%s", request.args.get("c"), request.args.get("a"))
        return render_template("errors/404.html"), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        app.logger.info("method %s not allowed: c=%s a=%s",
                        request.method, request.args.get("c"), request.args.get("a"))
        return render_template("errors/405.html", allowed=getattr(e, "valid_methods", None)), 405, {
            "Allow": ", ".join(getattr(e, "valid_methods", None) or [])
        }

    @app.errorhandler(500)
    def internal_error(e):
        db.session.rollback()
        return render_template("errors/500.html"), 500


def create_app(config_name: str | None = None):
    config_name = config_name or os.environ.get("APP_ENV", "development")
    app = Flask(__name__, template_folder="templates")
    app.config.from_object(config_by_name[config_name])
    configure_logging(app)

    db.init_app(app)
    csrf.init_app(app)
    migrate.init_app(app, db)
    load_models()
    # Flask-Session (database backend)
    app.config["SESSION_SQLALCHEMY"] = db
    session_ext.init_app(app)

    @app.context_processor
    def inject_helpers():
        # usable in templates as {{ csrf_token() }} and {{ route_url('posts', 'show', id=1) }}
        return {"csrf_token": generate_csrf, "route_url": route_url}

    login_manager = LoginManager()
    login_manager.init_app(app)

    from models.users import Users

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(Users, int(user_id))

    # fail at start-up if a route points to a missing controller or action
    ROUTES.validate()
    register_blueprints(app)
    register_error_handlers(app)

    app.logger.info("%s %s started (%s)", app.config["APP_NAME"], app.config["APP_VERSION"], config_name)
    return app


if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        db.create_all()
    app.run(host="0.0.0.0", debug=True, use_reloader=False)
