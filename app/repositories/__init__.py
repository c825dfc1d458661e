"""Repository layer for database operations."""

from app.repositories.blog import BlogRepository
from app.repositories.category import CategoryRepository
from app.repositories.user import UserRepository

__all__ = ["UserRepository", "BlogRepository", "CategoryRepository"]
