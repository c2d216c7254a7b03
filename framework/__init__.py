# framework/__init__.py
