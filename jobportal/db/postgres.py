"""
SQL Connection Utility + SqlStore

Each entity store is one two-column table: the key and the record as JSON
text. Tables are independent - no foreign keys, no indexes besides the
primary key. Works with PostgreSQL in production and SQLite in tests.
"""
import logging
from contextlib import contextmanager
from functools import lru_cache
from typing import List, Optional, Type

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from jobportal.core.config import get_settings
from jobportal.core.errors import StorageError
from jobportal.db.store import EntityStore, V

logger = logging.getLogger(__name__)


@lru_cache()
def get_engine() -> Engine:
    """Engine for settings.postgres_url (pool_pre_ping drops dead connections)"""
    settings = get_settings()
    return create_engine(
        settings.postgres_url,
        pool_pre_ping=True,
        echo=settings.debug  # Log SQL queries in debug mode
    )


@contextmanager
def get_db_session(session_factory: Optional[sessionmaker] = None):
    """
    Context manager for database sessions.
    Usage:
        with get_db_session() as db:
            db.execute(text("SELECT 1"))
    """
    factory = session_factory or sessionmaker(bind=get_engine(), autoflush=False)
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def test_postgres_connection(engine: Optional[Engine] = None) -> bool:
    """
    Test if the SQL database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with (engine or get_engine()).connect() as conn:
            return conn.execute(text("SELECT 1")).scalar() == 1
    except SQLAlchemyError as e:
        logger.warning("SQL connection failed: %s", e)
        return False


class SqlStore(EntityStore[V]):
    """EntityStore backed by one SQL table (entity_key, payload)."""

    def __init__(self, name: str, model: Type[V], engine: Optional[Engine] = None):
        if not name.isidentifier():
            raise ValueError(f"Invalid table name: {name!r}")
        super().__init__(name, model)
        self.engine = engine or get_engine()
        self.session_factory = sessionmaker(bind=self.engine, autoflush=False)
        self._table_ready = False

    @contextmanager
    def _session(self):
        try:
            if not self._table_ready:
                with self.engine.begin() as conn:
                    conn.execute(text(
                        f"CREATE TABLE IF NOT EXISTS {self.name} ("
                        "entity_key VARCHAR(255) PRIMARY KEY, payload TEXT NOT NULL)"
                    ))
                self._table_ready = True
            with get_db_session(self.session_factory) as db:
                yield db
        except SQLAlchemyError as exc:
            raise StorageError(f"{self.name}: {exc}") from exc

    def get(self, key: str) -> Optional[V]:
        with self._session() as db:
            payload = db.execute(
                text(f"SELECT payload FROM {self.name} WHERE entity_key = :key"),
                {"key": key}
            ).scalar()
        return self.model.model_validate_json(payload) if payload is not None else None

    def insert(self, key: str, value: V) -> V:
        # delete + insert in one transaction keeps the upsert dialect-neutral
        with self._session() as db:
            db.execute(text(f"DELETE FROM {self.name} WHERE entity_key = :key"), {"key": key})
            db.execute(
                text(f"INSERT INTO {self.name} (entity_key, payload) VALUES (:key, :payload)"),
                {"key": key, "payload": value.model_dump_json()}
            )
        return value

    def remove(self, key: str) -> Optional[V]:
        with self._session() as db:
            payload = db.execute(
                text(f"SELECT payload FROM {self.name} WHERE entity_key = :key"),
                {"key": key}
            ).scalar()
            if payload is None:
                return None
            db.execute(text(f"DELETE FROM {self.name} WHERE entity_key = :key"), {"key": key})
        return self.model.model_validate_json(payload)

    def values(self) -> List[V]:
        with self._session() as db:
            rows = db.execute(
                text(f"SELECT payload FROM {self.name} ORDER BY entity_key")
            ).scalars().all()
        return [self.model.model_validate_json(payload) for payload in rows]
