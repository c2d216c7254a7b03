# forms/project_form.py
from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SelectField, SubmitField
from wtforms.validators import AnyOf, DataRequired, Length, Optional, URL

from forms.user_form import strip_whitespace
from models.projects import PROJECT_STATUSES

STATUS_CHOICES = [
    ("active", "Active"),
    ("completed", "Completed"),
    ("on_hold", "On hold"),
]

class ProjectForm(FlaskForm):
    title = StringField("Title", filters=[strip_whitespace], validators=[
        DataRequired(message="Title is required."),
        Length(min=3, max=255, message="Title must be between 3 and 255 characters.")])
    description = TextAreaField("Description", filters=[strip_whitespace], validators=[
        DataRequired(message="Description is required."),
        Length(min=10, message="Description must be at least 10 characters.")])
    technologies = StringField("Technologies", filters=[strip_whitespace], validators=[Optional(), Length(max=255)])
    # optional, but must be absolute URLs when given
    repository_url = StringField("Repository URL", filters=[strip_whitespace], validators=[
        Optional(), URL(require_tld=False, message="Invalid repository URL."), Length(max=500)])
    live_url = StringField("Live demo URL", filters=[strip_whitespace], validators=[
        Optional(), URL(require_tld=False, message="Invalid live demo URL."), Length(max=500)])
    status = SelectField("Status", choices=STATUS_CHOICES, default="active", validate_choice=False,
                         validators=[AnyOf(PROJECT_STATUSES, message="Invalid status.")])
    submit = SubmitField("Save")
