# models/projects.py
from datetime import datetime
from extensions import db

PROJECT_STATUSES = ("active", "completed", "on_hold")

class Projects(db.Model):
    __tablename__ = "projects"
    __table_args__ = (
        db.CheckConstraint("status IN ('active', 'completed', 'on_hold')", name="ck_projects_status"),
    )

    project_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.user_id"), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    technologies = db.Column(db.String(255), nullable=True)
    repository_url = db.Column(db.String(500), nullable=True)
    live_url = db.Column(db.String(500), nullable=True)
    status = db.Column(db.String(20), nullable=False, default="active")
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("Users", back_populates="projects")

    # No membership table yet: the creator is the only member.
    @property
    def members(self):
        return [self.user] if self.user else []

    @property
    def member_count(self) -> int:
        return 1

    @property
    def technology_list(self):
        return [t.strip() for t in (self.technologies or "").split(",") if t.strip()]

    def __repr__(self):
        return f"<Project {self.title}>"
