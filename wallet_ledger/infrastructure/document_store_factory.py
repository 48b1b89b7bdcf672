"""Factory helpers to select the wallet document store backend."""

from wallet_ledger.application.ports.database import DatabaseEnginePort
from wallet_ledger.application.ports.document_store import DocumentStorePort
from wallet_ledger.infrastructure.json_document_store import JsonDocumentStore
from wallet_ledger.infrastructure.settings import WalletSettings
from wallet_ledger.infrastructure.sqlalchemy_document_store import (
    SqlAlchemyDocumentStore,
)


def create_document_store(
    db_port: DatabaseEnginePort | None = None,
    backend: str | None = None,
    settings: WalletSettings | None = None,
) -> DocumentStorePort:
    """Return a document store implementation based on configuration.

    Args:
        db_port: Port providing engines for the SQL backend.
        backend: Optional backend override (json or sqlalchemy).
        settings: Optional settings; read from the environment if omitted.

    Returns:
        DocumentStorePort: Concrete document store.
    """
    if backend is None:
        resolved_settings = settings or WalletSettings.from_env()
        backend = resolved_settings.backend
    selected_backend = backend.strip().lower()

    if selected_backend == "json":
        return JsonDocumentStore()

    if selected_backend == "sqlalchemy":
        if db_port is None:
            raise RuntimeError(
                "SQLAlchemy backend requires a database engine adapter."
            )
        return SqlAlchemyDocumentStore(db_port)

    raise ValueError(
        "Unsupported wallet backend: "
        f"{selected_backend}. Expected json or sqlalchemy."
    )


__all__ = ["create_document_store"]
