# services/post_service.py
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload, selectinload

from extensions import db
from models.comments import Comments
from models.posts import Posts


class PostService(object):
    def __init__(self):
        pass

    def fetch_page(self, page: int, per_page: int):
        """One page of posts, newest first. offset = (page - 1) * per_page."""
        query = (Posts.query
                 .options(joinedload(Posts.user))
                 .order_by(Posts.created_at.desc(), Posts.post_id.desc()))
        return query.paginate(page=page, per_page=per_page, error_out=False)

    def fetch_all(self) -> List[Posts]:
        return (Posts.query
                .options(joinedload(Posts.user))
                .order_by(Posts.created_at.desc(), Posts.post_id.desc())
                .all())

    def fetch_recent(self, limit: int = 5) -> List[Posts]:
        return (Posts.query
                .options(joinedload(Posts.user))
                .order_by(Posts.created_at.desc(), Posts.post_id.desc())
                .limit(limit)
                .all())

    def fetch_by_user(self, user_id: int) -> List[Posts]:
        return (Posts.query
                .filter(Posts.user_id == user_id)
                .order_by(Posts.created_at.desc(), Posts.post_id.desc())
                .all())

    def fetch_by_id(self, post_id: Optional[int]) -> Optional[Posts]:
        if post_id is None:
            return None
        return db.session.get(Posts, post_id)

    def fetch_with_comments(self, post_id: Optional[int]) -> Optional[Posts]:
        """Post with its author and comments (and their authors) attached."""
        if post_id is None:
            return None
        return (Posts.query
                .options(joinedload(Posts.user),
                         selectinload(Posts.comments).joinedload(Comments.user))
                .filter(Posts.post_id == post_id)
                .first())

    def comment_counts(self, post_ids: List[int]) -> dict:
        if not post_ids:
            return {}
        rows = (db.session.query(Comments.post_id, func.count(Comments.comment_id))
                .filter(Comments.post_id.in_(post_ids))
                .group_by(Comments.post_id)
                .all())
        return {post_id: count for post_id, count in rows}

    def create_post(self, *, user_id: int, title: str, content: str, tags: Optional[str] = None) -> Posts:
        post = Posts(user_id=user_id, title=title, content=content, tags=tags or None)
        db.session.add(post)
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        return post

    def update_post(self, post: Posts, *, title: str, content: str, tags: Optional[str] = None) -> Posts:
        post.title = title
        post.content = content
        post.tags = tags or None
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        return post

    def delete_post(self, post: Posts) -> None:
        """Delete the post's comments and then the post, in one transaction."""
        try:
            for comment in Comments.query.filter(Comments.post_id == post.post_id).all():
                db.session.delete(comment)
            db.session.delete(post)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise

    def count(self) -> int:
        return Posts.query.count()

    def count_since(self, since) -> int:
        return Posts.query.filter(Posts.created_at >= since).count()
