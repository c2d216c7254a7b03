# users_controller.py
from sqlalchemy.exc import SQLAlchemyError

from forms.user_form import RegistrationForm, UserEditForm
from framework.controller import Controller, login_required
from services.user_service import UserService


class UserController(Controller):
    resource = "users"

    @login_required
    def index(self):
        users = UserService.get_all_users()
        return self.render("users/index.html", users=users)

    @login_required
    def show(self):
        user, response = self.find_or_redirect(UserService.get_user, "User")
        if response is not None:
            return response
        return self.render("users/show.html", user=user, posts=user.posts, projects=user.projects)

    @login_required
    def create(self):
        return self.render("users/create.html", form=RegistrationForm(formdata=None))

    @login_required
    def store(self):
        form = RegistrationForm(formdata=self.ctx.form)
        if not form.validate():
            return self.render("users/create.html", form=form)
        try:
            user = UserService.add_user(form.username.data, form.email.data, form.password.data)
        except SQLAlchemyError:
            self.persistence_failed("Could not create the user.")
            return self.render("users/create.html", form=form)
        self.flash("User created.", "success")
        return self.redirect_to("users", "show", id=user.user_id)

    def _load_self(self):
        """Users may only edit their own account."""
        user, response = self.find_or_redirect(UserService.get_user, "User")
        if response is None and user.user_id != self.user_id:
            self.flash("You do not have permission to edit this user.", "error")
            response = self.redirect_to("users", "show", id=user.user_id)
        return user, response

    @login_required
    def edit(self):
        user, response = self._load_self()
        if response is not None:
            return response
        form = UserEditForm(formdata=None, obj=user, user_id=user.user_id)
        return self.render("users/edit.html", form=form, user=user)

    @login_required
    def update(self):
        user, response = self._load_self()
        if response is not None:
            return response
        form = UserEditForm(formdata=self.ctx.form, user_id=user.user_id)
        if not form.validate():
            return self.render("users/edit.html", form=form, user=user)
        try:
            UserService.update_user(user, form.username.data, form.email.data, form.password.data)
        except SQLAlchemyError:
            self.persistence_failed("Could not update the user.")
            return self.redirect_to("users", "edit", id=user.user_id)
        self.flash("User updated.", "success")
        return self.redirect_to("users", "show", id=user.user_id)

    @login_required
    def delete(self):
        user, response = self.find_or_redirect(UserService.get_user, "User")
        if response is not None:
            return response
        if user.user_id == self.user_id:
            self.flash("You cannot delete your own account.", "error")
            return self.redirect_to("users", "index")
        if user.posts or user.projects or user.comments:
            self.flash("This user still owns posts, projects or comments.", "error")
            return self.redirect_to("users", "index")
        try:
            UserService.delete_user(user)
        except SQLAlchemyError:
            self.persistence_failed("Could not delete the user.")
        else:
            self.flash("User deleted.", "success")
        return self.redirect_to("users", "index")
