# framework/controller.py
from functools import wraps

from flask import current_app, redirect, render_template
from werkzeug.exceptions import HTTPException

from extensions import db
from framework.context import RequestContext
from framework.urls import route_url


def login_required(action):
    """Gate a controller action behind a logged-in session.

    Anonymous requests are redirected to the login route before the action
    body runs, so nothing is read or written on their behalf.
    """
    @wraps(action)
    def wrapper(self, *args, **kwargs):
        if not self.ctx.session.is_authenticated:
            return self.redirect_to("auth", "login")
        return action(self, *args, **kwargs)
    wrapper.login_required = True
    return wrapper


class Controller(object):
    # resource prefix used for redirects back to this controller
    resource = "home"
    failure_message = "An internal error occurred. Please try again."

    def __init__(self, ctx: RequestContext):
        self.ctx = ctx

    # ---- request helpers ----
    @property
    def user_id(self):
        return self.ctx.session.user_id

    def param_id(self, key: str = "id"):
        return self.ctx.get_int(key)

    def flash(self, message: str, category: str = "info") -> None:
        self.ctx.session.flash(message, category)

    def is_owner(self, record) -> bool:
        return record is not None and self.user_id is not None and record.user_id == self.user_id

    def find_or_redirect(self, fetch, noun: str):
        """Look up the `id` query parameter with `fetch`.

        Returns (record, None) on success, or (None, response) where the
        response redirects to this resource's index (with an error flash when
        the id was given but nothing matched).
        """
        record_id = self.param_id()
        if record_id is None:
            return None, self.redirect_to(self.resource, "index")
        record = fetch(record_id)
        if record is None:
            self.flash(f"{noun} not found.", "error")
            return None, self.redirect_to(self.resource, "index")
        return record, None

    def load_owned(self, fetch, noun: str, verb: str):
        """Like find_or_redirect, but only the record's owner gets it back."""
        record, response = self.find_or_redirect(fetch, noun)
        if response is None and not self.is_owner(record):
            self.flash(f"You do not have permission to {verb} this {noun.lower()}.", "error")
            response = self.redirect_to(self.resource, "show", id=self.param_id())
        return record, response

    def persistence_failed(self, message: str) -> None:
        current_app.logger.exception("%s: %s", type(self).__name__, message)
        self.flash(message, "error")

    # ---- responses ----
    def redirect_to(self, resource: str, action: str, **params):
        return redirect(route_url(resource, action, **params))

    def render(self, template: str, **context):
        context.setdefault("resource", self.resource)
        return render_template(template, **context)

    # ---- invocation ----
    def invoke(self, action: str):
        """Run `action`; unexpected failures become a logged flash redirect."""
        handler = getattr(self, action)
        try:
            return handler()
        except HTTPException:
            raise
        except Exception:
            db.session.rollback()
            current_app.logger.exception("%s.%s failed", type(self).__name__, action)
            return self.on_failure(action)

    def on_failure(self, action: str):
        self.flash(self.failure_message, "error")
        if action == "index":
            return self.redirect_to("home", "index")
        return self.redirect_to(self.resource, "index")
