from .user import User
from .category import Category
from .post import Post
from .media import Media

__all__ = [
    "User",
    "Category",
    "Post",
    "Media"
]
