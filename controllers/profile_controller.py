# profile_controller.py
from sqlalchemy.exc import SQLAlchemyError

from forms.user_form import UserEditForm
from framework.controller import Controller, login_required
from services.post_service import PostService
from services.project_service import ProjectService
from services.user_service import UserService


class ProfileController(Controller):
    resource = "profile"

    @login_required
    def index(self):
        user = UserService.get_user(self.user_id)
        return self.render("profile/index.html", user=user, posts=PostService().fetch_by_user(self.user_id))

    @login_required
    def edit(self):
        user = UserService.get_user(self.user_id)
        if not self.ctx.is_post:
            form = UserEditForm(formdata=None, obj=user, user_id=user.user_id)
            return self.render("profile/edit.html", form=form, user=user)

        form = UserEditForm(formdata=self.ctx.form, user_id=user.user_id)
        if not form.validate():
            return self.render("profile/edit.html", form=form, user=user)
        try:
            UserService.update_user(user, form.username.data, form.email.data, form.password.data)
        except SQLAlchemyError:
            self.persistence_failed("Could not update your profile.")
            return self.render("profile/edit.html", form=form, user=user)
        self.ctx.session.store["username"] = user.username
        self.flash("Profile updated.", "success")
        return self.redirect_to("profile", "index")

    @login_required
    def posts(self):
        return self.render("profile/posts.html", posts=PostService().fetch_by_user(self.user_id))

    @login_required
    def projects(self):
        return self.render("profile/projects.html", projects=ProjectService().fetch_by_user(self.user_id))
