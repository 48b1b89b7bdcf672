"""Shared scanning helpers for wallet use cases."""

from wallet_ledger.application.ports.document_store import DocumentStorePort
from wallet_ledger.domain.models.wallet import Wallet
from wallet_ledger.domain.services.validation import (
    validate_wallet_record,
    wallet_collection,
)


def load_wallet_collection(store: DocumentStorePort, location) -> list:
    """Materialize the wallets collection stored at a location.

    Args:
        store: Document store owning the location.
        location: Handle naming the persisted document.

    Returns:
        list: Raw collection elements in stored order.
    """
    return wallet_collection(store.parse(location), location)


def find_first_wallet(collection: list, name: str, location) -> Wallet | None:
    """Scan a collection and return the first wallet with a matching name.

    Every element visited before the match is validated; elements after the
    match are not read.

    Args:
        collection: Raw collection elements.
        name: Exact wallet name to look for.
        location: Location of the collection, for error messages.

    Returns:
        Wallet | None: The first match, or None when no record matches.
    """
    for index, record in enumerate(collection):
        wallet = validate_wallet_record(record, location, index)
        if wallet.name == name:
            return wallet
    return None


__all__ = ["load_wallet_collection", "find_first_wallet"]
