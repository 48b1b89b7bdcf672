"""Composition root for wiring infrastructure adapters."""

from wallet_ledger.application.ports.database import DatabaseEnginePort
from wallet_ledger.application.ports.document_store import DocumentStorePort
from wallet_ledger.application.use_cases.wallet_ledger import WalletLedger
from wallet_ledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from wallet_ledger.infrastructure.document_store_factory import (
    create_document_store,
)
from wallet_ledger.infrastructure.logging.logger import get_app_logger
from wallet_ledger.infrastructure.settings import WalletSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_document_store(
    settings: WalletSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> DocumentStorePort:
    """Return the configured wallet document store."""
    resolved_settings = settings or WalletSettings.from_env()
    resolved_db = db_port
    if resolved_settings.backend == "sqlalchemy" and resolved_db is None:
        resolved_db = build_database_adapter()
    return create_document_store(
        resolved_db,
        settings=resolved_settings,
    )


def build_wallet_ledger(
    settings: WalletSettings | None = None,
    document_store: DocumentStorePort | None = None,
) -> WalletLedger:
    """Return a wallet ledger over the configured document store."""
    store = document_store or build_document_store(settings)
    return WalletLedger(store, logger=get_app_logger())


__all__ = [
    "build_database_adapter",
    "build_document_store",
    "build_wallet_ledger",
]
