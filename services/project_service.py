# project_service.py
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from extensions import db
from models.projects import Projects, PROJECT_STATUSES


class ProjectService(object):
    def __init__(self):
        pass

    def create_project(self, *, user_id: int, title: str, description: str, technologies: Optional[str],
                       repository_url: Optional[str], live_url: Optional[str], status: str) -> Projects:
        project = Projects(
            user_id=user_id,
            title=title,
            description=description,
            technologies=technologies or None,
            repository_url=repository_url or None,
            live_url=live_url or None,
            status=status,
        )
        db.session.add(project)
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        return project

    def fetch_page(self, page: int, per_page: int, status: Optional[str] = None, search: Optional[str] = None):
        """Newest first. An unknown status is ignored; search matches title or description."""
        query = Projects.query.options(joinedload(Projects.user))
        if status in PROJECT_STATUSES:
            query = query.filter(Projects.status == status)
        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(Projects.title.ilike(pattern), Projects.description.ilike(pattern)))
        query = query.order_by(Projects.created_at.desc(), Projects.project_id.desc())
        return query.paginate(page=page, per_page=per_page, error_out=False)

    def fetch_by_user(self, user_id: int) -> List[Projects]:
        return (Projects.query
                .filter(Projects.user_id == user_id)
                .order_by(Projects.created_at.desc(), Projects.project_id.desc())
                .all())

    def fetch_by_id(self, project_id: Optional[int]) -> Optional[Projects]:
        if project_id is None:
            return None
        return db.session.get(Projects, project_id)

    def update_project(self, project: Projects, *, title: str, description: str, technologies: Optional[str],
                       repository_url: Optional[str], live_url: Optional[str], status: str) -> Projects:
        project.title = title
        project.description = description
        project.technologies = technologies or None
        project.repository_url = repository_url or None
        project.live_url = live_url or None
        project.status = status
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        return project

    @staticmethod
    def delete_project(project: Projects) -> None:
        try:
            db.session.delete(project)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise

    @staticmethod
    def count() -> int:
        return Projects.query.count()
