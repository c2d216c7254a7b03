# models/comments.py
from datetime import datetime
from extensions import db

COMMENT_MIN_LENGTH = 5

class Comments(db.Model):
    __tablename__ = "comments"

    comment_id = db.Column(db.Integer, primary_key=True)
    post_id = db.Column(db.Integer, db.ForeignKey("posts.post_id"), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.user_id"), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    user = db.relationship("Users", back_populates="comments")
    post = db.relationship("Posts", back_populates="comments")

    def can_edit(self, user_id) -> bool:
        return user_id is not None and self.user_id == user_id

    def summary(self, length: int = 100) -> str:
        if len(self.content) <= length:
            return self.content
        return self.content[:length] + "..."

    def __repr__(self):
        return f"<Comment {self.comment_id} on post {self.post_id}>"
