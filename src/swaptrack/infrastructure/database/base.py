"""SQLite engine and transactional session handling shared by stores."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from swaptrack.shared.exceptions import StorageError

MEMORY = ":memory:"


class BaseDatabase:
    """Owns the engine for one SQLite database.

    Stores subclass this and do all their work inside ``session_scope``,
    so every SQLAlchemy failure reaches callers as a StorageError.
    """

    # Used in log and error messages, e.g. "Failed to close position"
    entity = "record"

    def __init__(self, db_path: str | Path) -> None:
        """Open the database and create missing tables.

        Args:
            db_path: Path to SQLite database file or ":memory:"
        """
        self.db_path = str(db_path)
        self.engine = create_engine(
            f"sqlite:///{self.db_path}",
            connect_args={"check_same_thread": False},
            echo=False,
            **self._pool_options(),
        )
        try:
            SQLModel.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            logger.error(f"Schema creation failed for {self.db_path}: {e}")
            raise StorageError(f"Cannot open database {self.db_path}: {e}") from e
        logger.info(f"Database initialised: {self.db_path}")

    @property
    def in_memory(self) -> bool:
        return self.db_path == MEMORY

    def _pool_options(self) -> dict:
        # A pooled in-memory database would give each connection its own copy
        if self.in_memory:
            return {"poolclass": StaticPool}
        return {}

    def get_session(self) -> Session:
        """Return a new session; prefer ``session_scope`` in store code."""
        return Session(self.engine)

    @contextmanager
    def session_scope(self, operation: str) -> Iterator[Session]:
        """Session that is rolled back and closed on failure.

        The caller commits. SQLAlchemy errors, including failure to open
        the session, are re-raised as StorageError.

        Args:
            operation: Verb for messages, e.g. "open" or "delete all"
        """
        session = None
        try:
            session = self.get_session()
            yield session
        except SQLAlchemyError as e:
            if session is not None:
                session.rollback()
            logger.error(f"{self.entity.capitalize()} store {operation} failed: {e}")
            raise StorageError(f"Failed to {operation} {self.entity}: {e}") from e
        finally:
            if session is not None:
                session.close()

    def close(self) -> None:
        """Dispose of the engine and its connections."""
        self.engine.dispose()
        logger.info(f"Database connection closed: {self.db_path}")

    def __enter__(self) -> "BaseDatabase":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
