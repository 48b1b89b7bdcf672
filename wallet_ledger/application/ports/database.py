"""Database ports for SQL-backed wallet storage.

Infrastructure implementations provide concrete adapters that turn a
database URL location into a ready-to-use engine.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing database engines keyed by location."""

    def get_engine(self, location: str) -> Engine:
        """Get the engine for a database URL.

        Args:
            location: Fully qualified database URL.

        Returns:
            Engine: SQLAlchemy engine connected to that database.
        """


__all__ = ["DatabaseEnginePort"]
