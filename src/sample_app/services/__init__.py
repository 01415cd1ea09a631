"""Business logic for accounts, microposts, relationships and feeds."""

from sample_app.services.base import FieldError, SaveResult, collect_field_errors
from sample_app.services.feed import feed
from sample_app.services.microposts import (
    create_micropost,
    delete_micropost,
    get_micropost,
    user_microposts,
)
from sample_app.services.relationships import (
    follow,
    followed_users,
    followers,
    get_relationship,
    is_following,
    unfollow,
)
from sample_app.services.users import (
    authenticate_user,
    create_user,
    destroy_user,
    email_taken,
    find_user_by_email,
    find_user_by_remember_token,
    get_user,
    toggle_admin,
    update_user,
    validate_user,
)

__all__ = [
    # Results
    "FieldError",
    "SaveResult",
    "collect_field_errors",
    # Users
    "authenticate_user",
    "create_user",
    "destroy_user",
    "email_taken",
    "find_user_by_email",
    "find_user_by_remember_token",
    "get_user",
    "toggle_admin",
    "update_user",
    "validate_user",
    # Microposts
    "create_micropost",
    "delete_micropost",
    "get_micropost",
    "user_microposts",
    # Relationships
    "follow",
    "followed_users",
    "followers",
    "get_relationship",
    "is_following",
    "unfollow",
    # Feed
    "feed",
]
