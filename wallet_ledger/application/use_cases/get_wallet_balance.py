"""Use case reading the balance of a wallet."""

from wallet_ledger.application.ports.document_store import DocumentStorePort
from wallet_ledger.application.use_cases.wallet_scan import (
    find_first_wallet,
    load_wallet_collection,
)


class GetWalletBalanceUseCase:
    """Look up the current balance of a wallet name."""

    def __init__(self, document_store: DocumentStorePort) -> None:
        self._document_store = document_store

    def execute(self, location, name: str) -> int | None:
        """Return the balance of the first wallet named ``name``.

        Args:
            location: Handle naming the persisted document.
            name: Wallet name to look up.

        Returns:
            int | None: The stored balance, or None if no wallet matches.
        """
        collection = load_wallet_collection(self._document_store, location)
        wallet = find_first_wallet(collection, name, location)
        if wallet is None:
            return None
        return wallet.balance


__all__ = ["GetWalletBalanceUseCase"]
