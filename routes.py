# routes.py
# ?c=<resource>&a=<action> -> (allowed methods, controller, action)
from controllers.api_controller import ApiController
from controllers.auth_controller import AuthController
from controllers.comments_controller import CommentController
from controllers.community_controller import CommunityController
from controllers.home_controller import HomeController
from controllers.posts_controller import PostController
from controllers.profile_controller import ProfileController
from controllers.projects_controller import ProjectController
from controllers.users_controller import UserController
from framework.router import GET, GET_POST, POST, Route, RouteTable


ROUTES = RouteTable(
    # used when neither c nor a is given
    default=Route(GET, HomeController, "index"),
    routes={
        "home": {
            "index": Route(GET, HomeController, "index"),
            "dashboard": Route(GET, HomeController, "dashboard"),
        },
        "auth": {
            "index": Route(GET, AuthController, "index"),
            "login": Route(GET_POST, AuthController, "login"),
            "logout": Route(GET, AuthController, "logout"),
            "register": Route(GET_POST, AuthController, "register"),
        },
        "users": {
            "index": Route(GET, UserController, "index"),
            "show": Route(GET, UserController, "show"),
            "create": Route(GET, UserController, "create"),
            "store": Route(POST, UserController, "store"),
            "edit": Route(GET, UserController, "edit"),
            "update": Route(POST, UserController, "update"),
            "delete": Route(POST, UserController, "delete"),
        },
        "community": {
            "index": Route(GET, CommunityController, "index"),
            "create": Route(GET_POST, CommunityController, "create"),
            "show": Route(GET, CommunityController, "show"),
            "edit": Route(GET, CommunityController, "edit"),
            "update": Route(POST, CommunityController, "update"),
            "delete": Route(POST, CommunityController, "delete"),
            "comment": Route(POST, CommunityController, "comment"),
        },
        "profile": {
            "index": Route(GET, ProfileController, "index"),
            "edit": Route(GET_POST, ProfileController, "edit"),
            "posts": Route(GET, ProfileController, "posts"),
            "projects": Route(GET, ProfileController, "projects"),
        },
        "posts": {
            "index": Route(GET, PostController, "index"),
            "show": Route(GET, PostController, "show"),
            "create": Route(GET, PostController, "create"),
            "store": Route(POST, PostController, "store"),
            "edit": Route(GET, PostController, "edit"),
            "update": Route(POST, PostController, "update"),
            "delete": Route(POST, PostController, "delete"),
            "comment": Route(POST, PostController, "comment"),
        },
        "projects": {
            "index": Route(GET, ProjectController, "index"),
            "show": Route(GET, ProjectController, "show"),
            "create": Route(GET, ProjectController, "create"),
            "store": Route(POST, ProjectController, "store"),
            "edit": Route(GET, ProjectController, "edit"),
            "update": Route(POST, ProjectController, "update"),
            "delete": Route(POST, ProjectController, "delete"),
            "join": Route(GET, ProjectController, "join"),
            "leave": Route(GET, ProjectController, "leave"),
        },
        "comments": {
            "edit": Route(GET, CommentController, "edit"),
            "update": Route(POST, CommentController, "update"),
            "delete": Route(POST, CommentController, "delete"),
        },
        "api": {
            "users": Route(GET, ApiController, "users"),
            "posts": Route(GET, ApiController, "posts"),
            "stats": Route(GET, ApiController, "stats"),
        },
    },
)
