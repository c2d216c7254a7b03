# comments_controller.py
from sqlalchemy.exc import SQLAlchemyError

from forms.post_form import CommentEditForm
from framework.controller import Controller, login_required
from services.comment_service import CommentService

# views a comment can be edited from
BACK_RESOURCES = ("posts", "community")


class CommentController(Controller):
    resource = "comments"

    @property
    def back(self) -> str:
        back = self.ctx.args.get("back")
        return back if back in BACK_RESOURCES else "posts"

    def _load_own_comment(self, verb):
        comment_id = self.param_id()
        comment = CommentService.get(comment_id)
        if comment is None:
            if comment_id is not None:
                self.flash("Comment not found.", "error")
            return None, self.redirect_to(self.back, "index")
        if not comment.can_edit(self.user_id):
            self.flash(f"You do not have permission to {verb} this comment.", "error")
            return None, self.redirect_to(self.back, "show", id=comment.post_id)
        return comment, None

    @login_required
    def edit(self):
        comment, response = self._load_own_comment("edit")
        if response is not None:
            return response
        return self.render("comments/edit.html", comment=comment, back=self.back,
                           form=CommentEditForm(formdata=None, obj=comment))

    @login_required
    def update(self):
        comment, response = self._load_own_comment("edit")
        if response is not None:
            return response
        form = CommentEditForm(formdata=self.ctx.form)
        if not form.validate():
            return self.render("comments/edit.html", comment=comment, back=self.back, form=form)
        try:
            CommentService.update(comment, form.content.data)
        except SQLAlchemyError:
            self.persistence_failed("Could not update the comment.")
        else:
            self.flash("Comment updated.", "success")
        return self.redirect_to(self.back, "show", id=comment.post_id)

    @login_required
    def delete(self):
        comment, response = self._load_own_comment("delete")
        if response is not None:
            return response
        post_id = comment.post_id
        try:
            CommentService.delete(comment)
        except SQLAlchemyError:
            self.persistence_failed("Could not delete the comment.")
        else:
            self.flash("Comment deleted.", "success")
        return self.redirect_to(self.back, "show", id=post_id)

    def on_failure(self, action: str):
        self.flash(self.failure_message, "error")
        return self.redirect_to(self.back, "index")
