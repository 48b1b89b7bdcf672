"""Database infrastructure for SQL-backed wallet storage.

This module creates and reuses SQLAlchemy engines keyed by database URL. It
belongs to the infrastructure layer because it deals with external systems.
"""

import threading

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from wallet_ledger.application.ports.database import DatabaseEnginePort


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engines: dict[str, Engine] = {}
_engines_lock = threading.Lock()


def get_engine(db_url: str) -> Engine:
    """Get a cached SQLAlchemy engine for a database URL.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: Lazily initialized engine, shared by every caller of the URL.
    """
    with _engines_lock:
        engine = _engines.get(db_url)
        if engine is None:
            engine = _create_engine(db_url)
            _engines[db_url] = engine
        return engine


def dispose_engines() -> None:
    """Dispose and forget every cached engine."""
    with _engines_lock:
        for engine in _engines.values():
            engine.dispose()
        _engines.clear()


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    The adapter hides pooling details behind the port so document stores can
    depend only on the protocol.
    """

    def get_engine(self, location: str) -> Engine:
        """Get the engine for a database URL.

        Returns:
            Engine: SQLAlchemy engine connected to ``location``.
        """
        return get_engine(str(location))


__all__ = [
    "get_engine",
    "dispose_engines",
    "SqlAlchemyDatabaseEngineAdapter",
]
