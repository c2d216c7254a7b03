# framework/router.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, Optional, Tuple

from flask import abort, current_app

from framework.context import RequestContext
from framework.controller import Controller


GET = frozenset({"GET"})
POST = frozenset({"POST"})
GET_POST = frozenset({"GET", "POST"})


class RouteConfigurationError(Exception):
    """A route points at a controller or action that does not exist."""


@dataclass(frozen=True)
class Route:
    methods: FrozenSet[str]
    controller: type
    action: str

    def allows(self, method: str) -> bool:
        if method in self.methods:
            return True
        # HEAD is answered wherever GET is
        return method == "HEAD" and "GET" in self.methods

    def __str__(self) -> str:
        name = getattr(self.controller, "__name__", repr(self.controller))
        return f"{'|'.join(sorted(self.methods))} -> {name}.{self.action}"


class RouteTable(object):
    """Two-level (resource, action) -> Route registry plus the default route."""

    def __init__(self, default: Route, routes: Dict[str, Dict[str, Route]]):
        self.default = default
        self._routes = routes

    def lookup(self, resource: Optional[str], action: Optional[str]) -> Optional[Route]:
        if not resource and not action:
            return self.default
        return self._routes.get(resource or "", {}).get(action or "")

    def __iter__(self) -> Iterator[Tuple[Optional[str], Optional[str], Route]]:
        yield None, None, self.default
        for resource, actions in self._routes.items():
            for action, route in actions.items():
                yield resource, action, route

    def validate(self) -> None:
        """Check every route's controller and action; raise on the first broken one."""
        for resource, action, route in self:
            check_controller(route)
            if not callable(getattr(route.controller, route.action, None)):
                raise RouteConfigurationError(
                    f"route {resource}/{action}: action '{route.action}' not found "
                    f"on controller '{route.controller.__name__}'"
                )


def check_controller(route: Route) -> None:
    if not (isinstance(route.controller, type) and issubclass(route.controller, Controller)):
        raise RouteConfigurationError(f"controller '{route.controller!r}' not found")


class Dispatcher(object):
    def __init__(self, routes: RouteTable):
        self.routes = routes

    def resolve(self, ctx: RequestContext) -> Route:
        route = self.routes.lookup(ctx.resource, ctx.action)
        if route is None:
            abort(404)
        if not route.allows(ctx.method):
            abort(405, valid_methods=sorted(route.methods))
        return route

    def dispatch(self, ctx: RequestContext):
        route = self.resolve(ctx)
        current_app.logger.debug("dispatch c=%s a=%s %s: %s", ctx.resource, ctx.action, ctx.method, route)

        check_controller(route)
        controller = route.controller(ctx)
        if not callable(getattr(controller, route.action, None)):
            raise RouteConfigurationError(
                f"action '{route.action}' not found on controller '{route.controller.__name__}'"
            )
        return controller.invoke(route.action)
