"""Use case checking whether a wallet name is taken."""

from wallet_ledger.application.ports.document_store import DocumentStorePort
from wallet_ledger.application.use_cases.wallet_scan import (
    find_first_wallet,
    load_wallet_collection,
)


class WalletExistsUseCase:
    """Report whether a wallet with a given name exists at a location."""

    def __init__(self, document_store: DocumentStorePort) -> None:
        self._document_store = document_store

    def execute(self, location, name: str) -> bool:
        """Return True on the first record named ``name``."""
        collection = load_wallet_collection(self._document_store, location)
        return find_first_wallet(collection, name, location) is not None


__all__ = ["WalletExistsUseCase"]
