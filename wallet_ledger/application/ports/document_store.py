"""Port for loading and persisting wallet documents.

A location is an opaque handle (a file path, a database URL) naming which
persisted collection an operation targets. Stores materialize the whole
document on every parse; the ledger never keeps a long-lived copy.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any, Protocol


class DocumentStoreError(RuntimeError):
    """Raised when a document cannot be read from or written to a location."""


class DocumentStorePort(Protocol):
    """Port exposing document-level access to persisted wallets."""

    def parse(self, location) -> MutableMapping[str, Any]:
        """Load the full document stored at a location.

        Args:
            location: Handle naming the persisted document.

        Returns:
            MutableMapping[str, Any]: The document tree. An empty mapping
            when nothing has been written to the location yet.
        """

    def write(
        self,
        location,
        collection_key: str,
        record: Mapping[str, Any],
    ) -> None:
        """Append a record to a named collection of the document.

        Args:
            location: Handle naming the persisted document.
            collection_key: Top-level collection receiving the record.
            record: Mapping to serialize into the collection.
        """

    def write_balance(self, location, name: str, balance: int) -> None:
        """Persist a balance for the first record matching a name.

        Args:
            location: Handle naming the persisted document.
            name: Wallet name identifying the record.
            balance: New balance to store.
        """


__all__ = ["DocumentStoreError", "DocumentStorePort"]
