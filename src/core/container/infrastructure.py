"""Process-wide infrastructure: the database and the logger.

Both are created lazily from ``settings`` and cached for the life of the
process. Units of work are not cached; each request gets its own.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


# ============================================================================
# Singletons
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Shared engine and session factory built from DATABASE_URL."""
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Shared logger, tagged with the app name, version and environment.

    Development gets colored console output; every other environment
    gets JSON lines.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    ).bind(
        app=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
    )


# ============================================================================
# Per request
# ============================================================================


def create_unit_of_work(database: Database | None = None) -> "SqlAlchemyUnitOfWork":
    """Open a unit of work on a new session.

    The caller closes it, normally with ``async with``:

        async with create_unit_of_work() as uow:
            result = await create_dispatcher(uow, current_user).dispatch(command)
    """
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    db = database or get_database()
    return SqlAlchemyUnitOfWork(db.session_factory(), get_logger())
