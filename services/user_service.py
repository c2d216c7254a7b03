from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from models.users import Users, db
from models.posts import Posts


class UserService:
    @staticmethod
    def add_user(username, email, password):
        user = Users(username=username, email=email)
        user.set_password(password)
        db.session.add(user)
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        return user

    @staticmethod
    def get_user(user_id):
        if user_id is None:
            return None
        return db.session.get(Users, user_id)

    @staticmethod
    def get_user_by_username(username):
        return Users.query.filter_by(username=username).first()

    @staticmethod
    def authenticate(username, password):
        """User whose password matches, else None."""
        user = UserService.get_user_by_username(username)
        if user is None or not user.check_password(password):
            return None
        return user

    @staticmethod
    def update_user(user, username, email, password=None):
        user.username = username
        user.email = email
        if password:
            user.set_password(password)
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        return user

    @staticmethod
    def delete_user(user):
        try:
            db.session.delete(user)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise

    @staticmethod
    def get_all_users():
        return Users.query.order_by(Users.username.asc()).all()

    @staticmethod
    def count():
        return Users.query.count()

    @staticmethod
    def count_since(since):
        return Users.query.filter(Users.created_at >= since).count()

    @staticmethod
    def top_posters(limit=5):
        """[(user, post_count)] ordered by number of posts."""
        post_count = func.count(Posts.post_id)
        return (db.session.query(Users, post_count)
                .outerjoin(Posts, Posts.user_id == Users.user_id)
                .group_by(Users.user_id)
                .order_by(post_count.desc(), Users.username.asc())
                .limit(limit)
                .all())
