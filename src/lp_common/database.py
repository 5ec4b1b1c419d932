"""Async SQLAlchemy engine: created lazily, only when the sql backend is selected."""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from config.settings import settings

_engine: AsyncEngine | None = None


def get_engine() -> AsyncEngine:
    """Get or create the process-wide engine for settings.DATABASE_URL."""
    global _engine  # noqa: PLW0603
    if _engine is None:
        _engine = create_async_engine(
            settings.DATABASE_URL,
            echo=settings.DEBUG,
            pool_pre_ping=True,
        )
    return _engine


async def dispose_engine() -> None:
    """Dispose the engine pool (app shutdown)."""
    global _engine  # noqa: PLW0603
    if _engine is not None:
        await _engine.dispose()
        _engine = None
