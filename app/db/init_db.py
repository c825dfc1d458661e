"""
Database initialization and verification script.

Creates missing tables and verifies connectivity. Can be run independently
(``python -m app.db.init_db``) or as part of the application startup.

Note:
    Production schema changes are managed by Alembic migrations.
    Run 'alembic upgrade head' to apply them.
"""

from asyncio import run as asyncio_run
from logging import getLogger

from app.configs import file_logger
from app.db.database import close_db, init_db
from app.errors.database import DatabaseInitializationError

logger = file_logger(getLogger(__name__))


async def main() -> None:
    """Verify database connection and create tables."""
    try:
        logger.info("Verifying database connection...")
        await init_db()
        logger.info("Database ready!")
    except Exception as e:
        logger.exception("Failed to connect to database")
        raise DatabaseInitializationError from e
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio_run(main())
