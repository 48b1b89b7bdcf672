"""SQLAlchemy-backed document store for wallet collections.

The location is a database URL. The ``wallets`` collection maps to a
``wallets`` table whose integer primary key preserves insertion order, so
the document handed to the ledger scans in the same order records were
written.
"""

from collections.abc import Mapping, MutableMapping
import threading
from typing import Any

from sqlalchemy import (
    BigInteger,
    Column,
    Integer,
    MetaData,
    String,
    Table,
    func,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from wallet_ledger.application.ports.database import DatabaseEnginePort
from wallet_ledger.application.ports.document_store import (
    DocumentStoreError,
    DocumentStorePort,
)
from wallet_ledger.domain.constants import WALLET_FIELDS, WALLETS_COLLECTION


metadata = MetaData()

wallets_table = Table(
    WALLETS_COLLECTION,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False, index=True),
    Column("address", String, nullable=False),
    Column("balance", BigInteger, nullable=False),
)


class SqlAlchemyDocumentStore(DocumentStorePort):
    """Document store reading and writing wallets through SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing an engine for each database URL.
        """
        self._db_port = db_port
        self._prepared: set[str] = set()
        self._prepare_lock = threading.Lock()

    def parse(self, location) -> MutableMapping[str, Any]:
        """Return the wallets table as a ``{"wallets": [...]}`` document.

        Raises:
            DocumentStoreError: If the database cannot be queried.
        """
        query = select(
            wallets_table.c.name,
            wallets_table.c.address,
            wallets_table.c.balance,
        ).order_by(wallets_table.c.id)
        try:
            engine = self._engine(location)
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        except SQLAlchemyError as exc:
            raise DocumentStoreError(
                f"Cannot read wallets from {location}: {exc}"
            ) from exc
        return {WALLETS_COLLECTION: [dict(row._mapping) for row in rows]}

    def write(
        self,
        location,
        collection_key: str,
        record: Mapping[str, Any],
    ) -> None:
        """Insert ``record`` as a new row of the wallets table.

        Raises:
            ValueError: If ``collection_key`` is not the wallets collection.
            DocumentStoreError: If the record is incomplete or the insert
                fails.
        """
        if collection_key != WALLETS_COLLECTION:
            raise ValueError(
                f"Unsupported collection: {collection_key}. "
                f"Expected {WALLETS_COLLECTION}."
            )
        missing = [field for field in WALLET_FIELDS if field not in record]
        if missing:
            raise DocumentStoreError(
                f"Record for {location} is missing fields: {missing}"
            )
        payload = {field: record[field] for field in WALLET_FIELDS}
        try:
            engine = self._engine(location)
            with engine.begin() as conn:
                conn.execute(insert(wallets_table), [payload])
        except SQLAlchemyError as exc:
            raise DocumentStoreError(
                f"Cannot insert wallet into {location}: {exc}"
            ) from exc

    def write_balance(self, location, name: str, balance: int) -> None:
        """Update the balance of the lowest-id row named ``name``.

        Raises:
            DocumentStoreError: If no row has that name or the update fails.
        """
        first_id = (
            select(func.min(wallets_table.c.id))
            .where(wallets_table.c.name == name)
            .scalar_subquery()
        )
        statement = (
            update(wallets_table)
            .where(wallets_table.c.id == first_id)
            .values(balance=balance)
        )
        try:
            engine = self._engine(location)
            with engine.begin() as conn:
                updated_rows = conn.execute(statement).rowcount
        except SQLAlchemyError as exc:
            raise DocumentStoreError(
                f"Cannot update balance of '{name}' at {location}: {exc}"
            ) from exc
        if updated_rows == 0:
            raise DocumentStoreError(
                f"No wallet named '{name}' to update at {location}"
            )

    def _engine(self, location) -> Engine:
        engine = self._db_port.get_engine(str(location))
        key = str(location)
        with self._prepare_lock:
            if key not in self._prepared:
                metadata.create_all(engine, checkfirst=True)
                self._prepared.add(key)
        return engine


__all__ = ["SqlAlchemyDocumentStore", "wallets_table", "metadata"]
