# auth_controller.py
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from forms.user_form import RegistrationForm, LoginForm
from framework.controller import Controller
from services.user_service import UserService


class AuthController(Controller):
    resource = "auth"

    def index(self):
        return self.render("auth/login.html", form=LoginForm(formdata=None))

    def login(self):
        if self.ctx.session.is_authenticated:
            return self.redirect_to("home", "index")
        if not self.ctx.is_post:
            return self.index()

        form = LoginForm(formdata=self.ctx.form)
        user = None
        if form.validate():
            user = UserService.authenticate(form.username.data, form.password.data)
        if user is None:
            current_app.logger.info("failed login for %r", form.username.data)
            self.flash("Invalid credentials.", "error")
            return self.redirect_to("auth", "login")
        self.ctx.session.login(user)
        return self.redirect_to("home", "index")

    def logout(self):
        self.ctx.session.logout()
        self.flash("You have been logged out.", "info")
        return self.redirect_to("auth", "login")

    def register(self):
        if self.ctx.session.is_authenticated:
            return self.redirect_to("home", "index")
        if not self.ctx.is_post:
            return self.render("auth/register.html", form=RegistrationForm(formdata=None))

        form = RegistrationForm(formdata=self.ctx.form)
        if not form.validate():
            return self.render("auth/register.html", form=form)
        try:
            UserService.add_user(form.username.data, form.email.data, form.password.data)
        except SQLAlchemyError:
            self.persistence_failed("Could not register the user. Please try again.")
            return self.render("auth/register.html", form=form)
        self.flash("Registration complete. Please log in.", "success")
        return self.redirect_to("auth", "login")
