# services/comment_service.py
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from extensions import db
from models.comments import Comments


class CommentService:

    @staticmethod
    def get(comment_id: Optional[int]) -> Optional[Comments]:
        if comment_id is None:
            return None
        return db.session.get(Comments, comment_id)

    @staticmethod
    def add(post_id: int, user_id: int, content: str) -> Comments:
        comment = Comments(post_id=post_id, user_id=user_id, content=content)
        db.session.add(comment)
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        return comment

    @staticmethod
    def update(comment: Comments, content: str) -> Comments:
        comment.content = content
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        return comment

    @staticmethod
    def delete(comment: Comments) -> None:
        try:
            db.session.delete(comment)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise

    @staticmethod
    def recent(limit: int = 5) -> List[Comments]:
        return (Comments.query
                .options(joinedload(Comments.user), joinedload(Comments.post))
                .order_by(Comments.created_at.desc(), Comments.comment_id.desc())
                .limit(limit)
                .all())

    @staticmethod
    def count_for_post(post_id: int) -> int:
        return Comments.query.filter_by(post_id=post_id).count()

    @staticmethod
    def count() -> int:
        return Comments.query.count()
