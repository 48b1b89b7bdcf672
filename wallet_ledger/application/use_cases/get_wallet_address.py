"""Use case reading the address of a wallet."""

from wallet_ledger.application.ports.document_store import DocumentStorePort
from wallet_ledger.application.use_cases.wallet_scan import (
    find_first_wallet,
    load_wallet_collection,
)


class GetWalletAddressUseCase:
    """Look up the address stored for a wallet name."""

    def __init__(self, document_store: DocumentStorePort) -> None:
        """Initialize the use case.

        Args:
            document_store: Store the wallets are read from.
        """
        self._document_store = document_store

    def execute(self, location, name: str) -> str | None:
        """Return the address of the wallet named ``name``.

        The address is returned exactly as stored. When several records
        share the name, the first one in collection order wins.

        Args:
            location: Handle naming the persisted document.
            name: Wallet name to look up.

        Returns:
            str | None: The stored address, or None if no wallet matches.
        """
        collection = load_wallet_collection(self._document_store, location)
        wallet = find_first_wallet(collection, name, location)
        if wallet is None:
            return None
        return wallet.address


__all__ = ["GetWalletAddressUseCase"]
