# models/__init__.py
# Import every table class here so db.create_all() sees them
from extensions import db

def load_models():
    # add new model modules here
    from .users import Users  # noqa: F401
    from .posts import Posts  # noqa: F401
    from .comments import Comments  # noqa: F401
    from .projects import Projects  # noqa: F401
