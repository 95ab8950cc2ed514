"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from src.specials_api.runtime.config.config_data import DatabaseConfig
from src.specials_api.runtime.context import get_config


class DbSessionService:
    def __init__(
        self,
        db_config: DatabaseConfig | None = None,
        environment: str | None = None,
    ):
        """Initialize the shared database engine and session factory."""
        main_config = get_config()
        db_config = db_config or main_config.database
        environment = environment or main_config.app.environment
        self._config = db_config

        logger.info("Configuring database engine for environment: {}", environment)
        engine_kwargs = self._get_engine_kwargs(db_config)
        self._engine = create_engine(db_config.connection_string, **engine_kwargs)

        if environment == "production":
            if db_config.is_sqlite:
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )
            logger.info(
                "Database engine initialized (pool_size={}, max_overflow={})",
                db_config.pool_size,
                db_config.max_overflow,
            )

    @property
    def engine(self) -> Engine:
        return self._engine

    def _get_engine_kwargs(self, db_config: DatabaseConfig) -> dict[str, Any]:
        """Engine options per backend; SQLite pools take no sizing arguments."""
        engine_kwargs: dict[str, Any] = {"echo": db_config.echo, "echo_pool": False}

        if db_config.is_sqlite:
            engine_kwargs["connect_args"] = {
                "check_same_thread": False,  # sessions cross threadpool workers
                "timeout": 20,  # lock timeout
            }
            if db_config.is_in_memory:
                # One shared connection, otherwise every checkout sees an empty db
                engine_kwargs["poolclass"] = StaticPool
            return engine_kwargs

        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
                "pool_pre_ping": True,
            }
        )
        if db_config.url.startswith("postgresql"):
            engine_kwargs["connect_args"] = {
                "application_name": "specials_api",
                "connect_timeout": 30,
            }
        return engine_kwargs

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # entities are read after commit
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Transactional scope: commit on success, roll back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {}: {}", type(e).__name__, e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error("Database health check failed: {}: {}", type(e).__name__, e)
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self._engine.pool
        return {
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    def dispose(self) -> None:
        self._engine.dispose()
