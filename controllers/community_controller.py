# community_controller.py
from controllers.posts_controller import PostController
from forms.post_form import PostForm
from framework.controller import login_required


class CommunityController(PostController):
    """Community board: the same posts and comments as PostController, newest first on one page."""
    resource = "community"
    templates = "community"

    @login_required
    def index(self):
        posts = self.posts.fetch_all()
        counts = self.posts.comment_counts([p.post_id for p in posts])
        return self.render(self.template("index"), posts=posts, comment_counts=counts)

    @login_required
    def create(self):
        if self.ctx.is_post:
            return self.store()
        return self.render(self.template("create"), form=PostForm(formdata=None))
