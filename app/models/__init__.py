"""Database models for the application."""

from app.models.blog import BlogDB
from app.models.category import CategoryDB
from app.models.comment import CommentDB
from app.models.user import UserDB

__all__ = ["UserDB", "BlogDB", "CategoryDB", "CommentDB"]
