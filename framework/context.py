# framework/context.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, MutableMapping, Optional

from flask import flash, request, session
from flask_login import current_user, login_user, logout_user


class SessionContext(object):
    """Session state seen by a controller: the logged-in user and flash messages."""

    def __init__(self, store: MutableMapping[str, Any], user: Any):
        self.store = store
        self.user = user

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user is not None and self.user.is_authenticated)

    @property
    def user_id(self) -> Optional[int]:
        if not self.is_authenticated:
            return None
        return self.user.user_id

    def login(self, user) -> None:
        login_user(user)
        self.store["username"] = user.username
        self.user = user

    def logout(self) -> None:
        logout_user()
        self.store.clear()

    def flash(self, message: str, category: str = "info") -> None:
        flash(message, category)


@dataclass
class RequestContext:
    """Everything a controller action reads from the incoming request."""
    method: str
    args: Mapping[str, str]
    form: Mapping[str, str]
    session: SessionContext

    @classmethod
    def from_flask(cls) -> "RequestContext":
        return cls(
            method=request.method,
            args=request.args,
            form=request.form,
            session=SessionContext(session, current_user),
        )

    @property
    def resource(self) -> Optional[str]:
        return self.args.get("c") or None

    @property
    def action(self) -> Optional[str]:
        return self.args.get("a") or None

    @property
    def is_post(self) -> bool:
        return self.method == "POST"

    def get_int(self, key: str, default: Optional[int] = None, source: str = "args") -> Optional[int]:
        """Integer query (or form) parameter; missing or malformed values give `default`."""
        values = self.form if source == "form" else self.args
        raw = values.get(key)
        if raw in (None, ""):
            return default
        try:
            return int(raw)
        except (TypeError, ValueError):
            return default
