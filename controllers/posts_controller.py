# posts_controller.py
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from forms.post_form import PostForm, CommentForm
from framework.controller import Controller, login_required
from services.comment_service import CommentService
from services.post_service import PostService


class PostController(Controller):
    resource = "posts"
    templates = "posts"

    def __init__(self, ctx):
        super().__init__(ctx)
        self.posts = PostService()

    def template(self, name: str) -> str:
        return f"{self.templates}/{name}.html"

    @login_required
    def index(self):
        page = max(self.ctx.get_int("page", 1), 1)
        pagination = self.posts.fetch_page(page, current_app.config["POSTS_PER_PAGE"])
        counts = self.posts.comment_counts([p.post_id for p in pagination.items])
        return self.render(self.template("index"), posts=pagination.items,
                           pagination=pagination, comment_counts=counts)

    @login_required
    def show(self):
        post, response = self.find_or_redirect(self.posts.fetch_with_comments, "Post")
        if response is not None:
            return response
        comment_form = CommentForm(formdata=None, post_id=post.post_id)
        return self.render(self.template("show"), post=post, comments=post.comments,
                           can_edit=self.is_owner(post), comment_form=comment_form)

    @login_required
    def create(self):
        return self.render(self.template("create"), form=PostForm(formdata=None))

    @login_required
    def store(self):
        form = PostForm(formdata=self.ctx.form)
        if not form.validate():
            return self.render(self.template("create"), form=form)
        try:
            post = self.posts.create_post(
                user_id=self.user_id,
                title=form.title.data,
                content=form.content.data,
                tags=form.tags.data,
            )
        except SQLAlchemyError:
            self.persistence_failed("Could not save the post. Please try again.")
            return self.render(self.template("create"), form=form)
        self.flash("Post created.", "success")
        return self.redirect_to(self.resource, "show", id=post.post_id)

    @login_required
    def edit(self):
        post, response = self.load_owned(self.posts.fetch_by_id, "Post", "edit")
        if response is not None:
            return response
        form = PostForm(formdata=None, obj=post)
        return self.render(self.template("edit"), form=form, post=post)

    @login_required
    def update(self):
        post, response = self.load_owned(self.posts.fetch_by_id, "Post", "edit")
        if response is not None:
            return response
        form = PostForm(formdata=self.ctx.form)
        if not form.validate():
            return self.render(self.template("edit"), form=form, post=post)
        try:
            self.posts.update_post(post, title=form.title.data, content=form.content.data, tags=form.tags.data)
        except SQLAlchemyError:
            self.persistence_failed("Could not update the post.")
        else:
            self.flash("Post updated.", "success")
        return self.redirect_to(self.resource, "show", id=post.post_id)

    @login_required
    def delete(self):
        post, response = self.load_owned(self.posts.fetch_by_id, "Post", "delete")
        if response is not None:
            return response
        try:
            self.posts.delete_post(post)
        except SQLAlchemyError:
            self.persistence_failed("Could not delete the post.")
        else:
            self.flash("Post deleted.", "success")
        return self.redirect_to(self.resource, "index")

    @login_required
    def comment(self):
        post_id = self.ctx.get_int("post_id", source="form")
        if post_id is None:
            return self.redirect_to(self.resource, "index")
        post = self.posts.fetch_by_id(post_id)
        if post is None:
            self.flash("Post not found.", "error")
            return self.redirect_to(self.resource, "index")

        form = CommentForm(formdata=self.ctx.form)
        if not form.validate():
            for message in form.content.errors:
                self.flash(message, "error")
            return self.redirect_to(self.resource, "show", id=post_id)
        try:
            CommentService.add(post_id=post_id, user_id=self.user_id, content=form.content.data)
        except SQLAlchemyError:
            self.persistence_failed("Could not add the comment.")
        else:
            self.flash("Comment added.", "success")
        return self.redirect_to(self.resource, "show", id=post_id)
