"""Shape validation for persisted wallet documents."""

from collections.abc import Mapping
from typing import Any

from wallet_ledger.domain.constants import (
    BALANCE_MAX,
    BALANCE_MIN,
    WALLETS_COLLECTION,
)
from wallet_ledger.domain.errors import MalformedWalletDataError
from wallet_ledger.domain.models.wallet import Wallet


def wallet_collection(document: Any, location) -> list:
    """Return the wallets collection of a parsed document.

    Args:
        document: Tree returned by the document store.
        location: Location the document was read from, for error messages.

    Returns:
        list: The collection, or an empty list when the key is absent.

    Raises:
        MalformedWalletDataError: If the document or collection has the
            wrong type.
    """
    if not isinstance(document, Mapping):
        raise MalformedWalletDataError(
            f"Document at {location} is not an object "
            f"(got {type(document).__name__})"
        )
    collection = document.get(WALLETS_COLLECTION)
    if collection is None:
        return []
    if not isinstance(collection, list):
        raise MalformedWalletDataError(
            f"'{WALLETS_COLLECTION}' at {location} is not a list "
            f"(got {type(collection).__name__})"
        )
    return collection


def validate_wallet_record(
    record: Any,
    location,
    index: int | None,
) -> Wallet:
    """Check one collection element and convert it into a Wallet.

    Args:
        record: Raw collection element.
        location: Location the element was read from.
        index: Position of the element inside the collection, or None for
            a record that is about to be written.

    Returns:
        Wallet: The validated wallet.

    Raises:
        MalformedWalletDataError: If a field is missing or has the wrong
            type. No defaults are substituted.
    """
    if index is None:
        where = f"new wallet record for {location}"
    else:
        where = f"{WALLETS_COLLECTION}[{index}] at {location}"
    if not isinstance(record, Mapping):
        raise MalformedWalletDataError(
            f"{where} is not an object (got {type(record).__name__})"
        )
    for field in ("name", "address"):
        if field not in record:
            raise MalformedWalletDataError(f"{where} is missing '{field}'")
        if not isinstance(record[field], str):
            raise MalformedWalletDataError(
                f"{where} field '{field}' must be a string "
                f"(got {type(record[field]).__name__})"
            )
    if "balance" not in record:
        raise MalformedWalletDataError(f"{where} is missing 'balance'")
    balance = record["balance"]
    if isinstance(balance, bool) or not isinstance(balance, int):
        raise MalformedWalletDataError(
            f"{where} field 'balance' must be an integer "
            f"(got {type(balance).__name__})"
        )
    if not BALANCE_MIN <= balance <= BALANCE_MAX:
        raise MalformedWalletDataError(
            f"{where} balance {balance} is outside the 64-bit range"
        )
    return Wallet(
        name=record["name"],
        address=record["address"],
        balance=balance,
    )


__all__ = ["wallet_collection", "validate_wallet_record"]
