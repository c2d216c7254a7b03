# api_controller.py
from flask import jsonify

from framework.controller import Controller, login_required
from services.post_service import PostService
from services.stats_service import StatsService
from services.user_service import UserService


class ApiController(Controller):
    resource = "api"

    @login_required
    def users(self):
        return jsonify({"ok": True, "users": [u.to_dict() for u in UserService.get_all_users()]})

    @login_required
    def posts(self):
        return jsonify({"ok": True, "posts": [p.to_dict() for p in PostService().fetch_all()]})

    @login_required
    def stats(self):
        return jsonify({"ok": True, "stats": StatsService().totals()})

    def on_failure(self, action: str):
        return jsonify({"ok": False, "message": self.failure_message}), 500
