# config.py
import os
from datetime import timedelta

class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "change_me")
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        "sqlite:///gestufas.db"  # created under the instance directory
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # ===== server-side sessions (database backend) =====
    SESSION_TYPE = "sqlalchemy"
    SESSION_SQLALCHEMY_TABLE = "flask_sessions"
    SESSION_PERMANENT = True
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    # enable in production behind HTTPS
    # SESSION_COOKIE_SECURE = True

    # CSRF token lifetime (24 hours)
    WTF_CSRF_TIME_LIMIT = 60 * 60 * 24

    # ============== logging ==============
    LOG_DIR = os.environ.get("LOG_DIR", "logs")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # ============== listing ==============
    POSTS_PER_PAGE = 10
    PROJECTS_PER_PAGE = 12

    APP_NAME = "GEstufas"
    APP_VERSION = "1.0.0"


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class StagingConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        "mysql+pymysql://staging_user@staging-db-host/gestufas_staging?charset=utf8mb4"
    )


class ProductionConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        "mysql+pymysql://production_user@production-db-host/gestufas_production?charset=utf8mb4"
    )
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "testing"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    WTF_CSRF_ENABLED = False
    LOG_DIR = ""


config_by_name = {
    "development": DevelopmentConfig,
    "staging": StagingConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
