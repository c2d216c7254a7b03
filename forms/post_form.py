# forms/post_form.py
from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, HiddenField, SubmitField
from wtforms.validators import DataRequired, Length, Optional

from forms.user_form import strip_whitespace
from models.comments import COMMENT_MIN_LENGTH


class PostForm(FlaskForm):
    title = StringField("Title", filters=[strip_whitespace], validators=[
        DataRequired(message="Title is required."),
        Length(min=3, max=255, message="Title must be between 3 and 255 characters.")])
    content = TextAreaField("Content", filters=[strip_whitespace], validators=[
        DataRequired(message="Content is required."),
        Length(min=10, message="Content must be at least 10 characters.")])
    # comma separated
    tags = StringField("Tags", filters=[strip_whitespace], validators=[Optional(), Length(max=255)])
    submit = SubmitField("Save")


class CommentEditForm(FlaskForm):
    content = TextAreaField("Comment", filters=[strip_whitespace], validators=[
        DataRequired(message="Comment cannot be empty."),
        Length(min=COMMENT_MIN_LENGTH,
               message=f"Comment must be at least {COMMENT_MIN_LENGTH} characters.")])
    submit = SubmitField("Save")


class CommentForm(CommentEditForm):
    post_id = HiddenField(validators=[DataRequired()])
    submit = SubmitField("Comment")
