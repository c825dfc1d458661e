"""User repository for database operations."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import UserDB


class UserRepository:
    """
    Read access to users.

    Accounts are managed by the authentication service; this repository
    only resolves the caller behind an access token.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, user_id: UUID) -> UserDB | None:
        """
        Get user by UUID.

        Args:
            user_id: User UUID

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            # pyrefly: ignore [bad-argument-type]
            select(UserDB).where(UserDB.uuid == user_id),
        )
        return result.scalar_one_or_none()
