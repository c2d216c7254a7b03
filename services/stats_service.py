# services/stats_service.py
from datetime import datetime
from typing import Dict, List

from services.comment_service import CommentService
from services.post_service import PostService
from services.project_service import ProjectService
from services.user_service import UserService


class StatsService(object):
    def __init__(self):
        self.posts = PostService()

    def totals(self) -> Dict[str, int]:
        return {
            "total_users": UserService.count(),
            "total_posts": self.posts.count(),
            "total_projects": ProjectService.count(),
            "total_comments": CommentService.count(),
        }

    def month_totals(self, now: datetime | None = None) -> Dict[str, int]:
        now = now or datetime.utcnow()
        start_of_month = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        return {
            "users_this_month": UserService.count_since(start_of_month),
            "posts_this_month": self.posts.count_since(start_of_month),
        }

    def recent_activity(self, limit: int = 5) -> List[dict]:
        """Latest posts and comments merged, newest first."""
        activities = []
        for post in self.posts.fetch_recent(3):
            activities.append({
                "type": "post",
                "title": post.title,
                "user": post.user.username,
                "post_id": post.post_id,
                "created_at": post.created_at,
            })
        for comment in CommentService.recent(3):
            activities.append({
                "type": "comment",
                "title": f"Comment on: {comment.post.title}",
                "user": comment.user.username,
                "post_id": comment.post_id,
                "created_at": comment.created_at,
            })
        activities.sort(key=lambda a: a["created_at"], reverse=True)
        return activities[:limit]
