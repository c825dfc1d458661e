"""Category repository for database operations."""

from sqlalchemy import asc, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors.database import DatabaseError
from app.models.category import CategoryDB
from app.schemas.category import CategoryCreate


class CategoryRepository:
    """Repository for Category database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def create(self, category: CategoryCreate) -> CategoryDB:
        """
        Create a new category.

        Args:
            category: Validated creation payload (name already checked)

        Returns:
            CategoryDB: Created category

        Raises:
            DatabaseError: If the write violates a constraint
        """
        db_category = CategoryDB(name=(category.name or "").strip())
        try:
            self.session.add(db_category)
            await self.session.flush()
            await self.session.refresh(db_category)
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        return db_category

    async def get_all(self) -> list[CategoryDB]:
        """
        Get every category, alphabetically.

        Returns:
            list[CategoryDB]: All categories
        """
        # pyrefly: ignore [bad-argument-type]
        result = await self.session.execute(select(CategoryDB).order_by(asc(CategoryDB.name)))
        return list(result.scalars().all())
