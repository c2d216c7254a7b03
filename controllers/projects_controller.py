# projects_controller.py
from datetime import datetime
import math

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from forms.project_form import ProjectForm
from framework.controller import Controller, login_required
from models.projects import PROJECT_STATUSES
from services.project_service import ProjectService


def _days_since(moment) -> int:
    if moment is None:
        return 0
    return max(math.ceil((datetime.utcnow() - moment).total_seconds() / 86400), 0)


class ProjectController(Controller):
    resource = "projects"

    def __init__(self, ctx):
        super().__init__(ctx)
        self.projects = ProjectService()

    def _form_values(self, form: ProjectForm) -> dict:
        return dict(
            title=form.title.data,
            description=form.description.data,
            technologies=form.technologies.data,
            repository_url=form.repository_url.data,
            live_url=form.live_url.data,
            status=form.status.data,
        )

    @login_required
    def index(self):
        page = max(self.ctx.get_int("page", 1), 1)
        status = self.ctx.args.get("status") or None
        search = (self.ctx.args.get("search") or "").strip() or None
        pagination = self.projects.fetch_page(page, current_app.config["PROJECTS_PER_PAGE"],
                                              status=status, search=search)
        status_filter = status if status in PROJECT_STATUSES else None
        page_args = {k: v for k, v in (("status", status_filter), ("search", search)) if v}
        return self.render("projects/index.html", projects=pagination.items, pagination=pagination,
                           status_filter=status_filter, search_term=search, page_args=page_args,
                           statuses=PROJECT_STATUSES)

    @login_required
    def show(self):
        project, response = self.find_or_redirect(self.projects.fetch_by_id, "Project")
        if response is not None:
            return response
        stats = {
            "total_members": project.member_count,
            "days_since_creation": _days_since(project.created_at),
            "last_update_days": _days_since(project.updated_at),
        }
        return self.render("projects/show.html", project=project, members=project.members,
                           can_edit=self.is_owner(project), stats=stats)

    @login_required
    def create(self):
        return self.render("projects/create.html", form=ProjectForm(formdata=None))

    @login_required
    def store(self):
        form = ProjectForm(formdata=self.ctx.form)
        if not form.validate():
            return self.render("projects/create.html", form=form)
        try:
            project = self.projects.create_project(user_id=self.user_id, **self._form_values(form))
        except SQLAlchemyError:
            self.persistence_failed("Could not save the project. Please try again.")
            return self.render("projects/create.html", form=form)
        self.flash("Project created.", "success")
        return self.redirect_to("projects", "show", id=project.project_id)

    @login_required
    def edit(self):
        project, response = self.load_owned(self.projects.fetch_by_id, "Project", "edit")
        if response is not None:
            return response
        return self.render("projects/edit.html", form=ProjectForm(formdata=None, obj=project), project=project)

    @login_required
    def update(self):
        project, response = self.load_owned(self.projects.fetch_by_id, "Project", "edit")
        if response is not None:
            return response
        form = ProjectForm(formdata=self.ctx.form)
        if not form.validate():
            return self.render("projects/edit.html", form=form, project=project)
        try:
            self.projects.update_project(project, **self._form_values(form))
        except SQLAlchemyError:
            self.persistence_failed("Could not update the project.")
        else:
            self.flash("Project updated.", "success")
        return self.redirect_to("projects", "show", id=project.project_id)

    @login_required
    def delete(self):
        project, response = self.load_owned(self.projects.fetch_by_id, "Project", "delete")
        if response is not None:
            return response
        try:
            self.projects.delete_project(project)
        except SQLAlchemyError:
            self.persistence_failed("Could not delete the project.")
        else:
            self.flash("Project deleted.", "success")
        return self.redirect_to("projects", "index")

    @login_required
    def join(self):
        project_id = self.param_id()
        if project_id is None:
            return self.redirect_to("projects", "index")
        self.flash("Joining projects is not available yet.", "info")
        return self.redirect_to("projects", "show", id=project_id)

    @login_required
    def leave(self):
        project_id = self.param_id()
        if project_id is None:
            return self.redirect_to("projects", "index")
        self.flash("Leaving projects is not available yet.", "info")
        return self.redirect_to("projects", "show", id=project_id)
