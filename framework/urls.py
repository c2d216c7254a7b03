# framework/urls.py
from flask import url_for

FRONT_ENDPOINT = "front.dispatch"


def route_url(resource: str | None = None, action: str | None = None, **params) -> str:
    """URL of the front controller for `?c=resource&a=action` plus extra query params."""
    if resource is None and action is None:
        return url_for(FRONT_ENDPOINT, **params)
    return url_for(FRONT_ENDPOINT, c=resource, a=action, **params)
