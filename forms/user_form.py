from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, SubmitField
from wtforms.validators import DataRequired, Email, EqualTo, Length, Optional, ValidationError
from models.users import Users


def strip_whitespace(value):
    return value.strip() if isinstance(value, str) else value


class RegistrationForm(FlaskForm):
    username = StringField('Username', filters=[strip_whitespace], validators=[
        DataRequired(message='Username is required.'),
        Length(min=3, max=80, message='Username must be between 3 and 80 characters.')])
    email = StringField('Email', filters=[strip_whitespace], validators=[
        DataRequired(message='Email is required.'),
        Email(message='Invalid email address.'), Length(max=120)])
    password = PasswordField('Password', validators=[
        DataRequired(message='Password is required.'),
        Length(min=6, message='Password must be at least 6 characters.')])
    confirm_password = PasswordField('Confirm password', validators=[
        DataRequired(message='Please confirm the password.'),
        EqualTo('password', message='Passwords do not match.')])
    submit = SubmitField('Register')

    def validate_username(self, username):
        user = Users.query.filter_by(username=username.data).first()
        if user is not None:
            raise ValidationError('Username is already taken.')

    def validate_email(self, email):
        user = Users.query.filter_by(email=email.data).first()
        if user is not None:
            raise ValidationError('Email is already registered.')


class UserEditForm(FlaskForm):
    """Edit username/email; the password only changes when a new one is typed."""
    username = StringField('Username', filters=[strip_whitespace], validators=[
        DataRequired(message='Username is required.'),
        Length(min=3, max=80, message='Username must be between 3 and 80 characters.')])
    email = StringField('Email', filters=[strip_whitespace], validators=[
        DataRequired(message='Email is required.'),
        Email(message='Invalid email address.'), Length(max=120)])
    password = PasswordField('New password', validators=[
        Optional(), Length(min=6, message='Password must be at least 6 characters.')])
    confirm_password = PasswordField('Confirm new password', validators=[
        EqualTo('password', message='Passwords do not match.')])
    submit = SubmitField('Save')

    def __init__(self, *args, user_id=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id

    def validate_username(self, username):
        user = Users.query.filter_by(username=username.data).first()
        if user is not None and user.user_id != self.user_id:
            raise ValidationError('Username is already taken.')

    def validate_email(self, email):
        user = Users.query.filter_by(email=email.data).first()
        if user is not None and user.user_id != self.user_id:
            raise ValidationError('Email is already registered.')


class LoginForm(FlaskForm):
    username = StringField('Username', filters=[strip_whitespace], validators=[DataRequired()])
    password = PasswordField('Password', validators=[DataRequired()])
    submit = SubmitField('Log in')
