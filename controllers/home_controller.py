# home_controller.py
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from framework.controller import Controller, login_required
from services.comment_service import CommentService
from services.stats_service import StatsService
from services.user_service import UserService


class HomeController(Controller):
    resource = "home"

    def __init__(self, ctx):
        super().__init__(ctx)
        self.stats = StatsService()

    def _safely(self, what, fetch, default):
        # a broken widget must not take the whole page down
        try:
            return fetch()
        except SQLAlchemyError:
            current_app.logger.warning("could not load %s", what, exc_info=True)
            return default

    def index(self):
        current_user = None
        if self.ctx.session.is_authenticated:
            current_user = UserService.get_user(self.user_id)
        totals = self._safely("statistics", self.stats.totals, {
            "total_users": 0, "total_posts": 0, "total_projects": 0, "total_comments": 0,
        })
        return self.render(
            "home/index.html",
            current=current_user,
            stats=totals,
            recent_posts=self._safely("recent posts", lambda: self.stats.posts.fetch_recent(5), []),
            recent_comments=self._safely("recent comments", lambda: CommentService.recent(5), []),
        )

    @login_required
    def dashboard(self):
        stats = dict(self.stats.totals())
        stats.update(self.stats.month_totals())
        return self.render(
            "home/dashboard.html",
            stats=stats,
            recent_activity=self.stats.recent_activity(),
            top_users=UserService.top_posters(5),
        )

    def on_failure(self, action: str):
        if action == "dashboard":
            return super().on_failure(action)
        return self.render("errors/500.html"), 500
