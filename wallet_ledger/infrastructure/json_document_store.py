"""JSON file document store for wallet collections."""

import json
import os
import threading
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any

from wallet_ledger.application.ports.document_store import (
    DocumentStoreError,
    DocumentStorePort,
)
from wallet_ledger.domain.constants import WALLETS_COLLECTION


class JsonDocumentStore(DocumentStorePort):
    """Document store persisting one JSON document per file path.

    Writes go through a temporary sibling file that atomically replaces the
    target, so readers never observe a partially written document.
    """

    def __init__(self, indent: int = 2) -> None:
        """Initialize the store.

        Args:
            indent: Indentation used when serializing documents.
        """
        self._indent = indent

    def parse(self, location) -> MutableMapping[str, Any]:
        """Load the JSON document stored at ``location``.

        Args:
            location: Filesystem path of the document.

        Returns:
            MutableMapping[str, Any]: Parsed document, or an empty dict when
            the file does not exist yet.

        Raises:
            DocumentStoreError: If the file cannot be read or decoded.
        """
        path = Path(location)
        if not path.exists():
            return {}
        try:
            with path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except json.JSONDecodeError as exc:
            raise DocumentStoreError(
                f"Cannot parse wallet document at {path}: {exc}"
            ) from exc
        except UnicodeDecodeError as exc:
            raise DocumentStoreError(
                f"Cannot decode wallet document at {path}: {exc}"
            ) from exc
        except OSError as exc:
            raise DocumentStoreError(
                f"Cannot read wallet document at {path}: {exc}"
            ) from exc

    def write(
        self,
        location,
        collection_key: str,
        record: Mapping[str, Any],
    ) -> None:
        """Append ``record`` to ``collection_key`` and persist the document.

        Raises:
            DocumentStoreError: If the existing collection is not a list or
                the file cannot be written.
        """
        document = self.parse(location)
        if not isinstance(document, MutableMapping):
            raise DocumentStoreError(
                f"Wallet document at {location} is not an object"
            )
        collection = document.setdefault(collection_key, [])
        if not isinstance(collection, list):
            raise DocumentStoreError(
                f"Collection '{collection_key}' at {location} is not a list"
            )
        collection.append(dict(record))
        self._persist(Path(location), document)

    def write_balance(self, location, name: str, balance: int) -> None:
        """Store ``balance`` on the first wallet named ``name``.

        Raises:
            DocumentStoreError: If no wallet has that name or the file cannot
                be written.
        """
        document = self.parse(location)
        wallets = []
        if isinstance(document, Mapping):
            wallets = document.get(WALLETS_COLLECTION) or []
        for wallet in wallets:
            if not isinstance(wallet, MutableMapping):
                continue
            if wallet.get("name") == name:
                wallet["balance"] = balance
                self._persist(Path(location), document)
                return
        raise DocumentStoreError(
            f"No wallet named '{name}' to update at {location}"
        )

    def _persist(self, path: Path, document: Mapping[str, Any]) -> None:
        tmp_path = path.with_name(
            f".{path.name}.{os.getpid()}.{threading.get_ident()}.tmp"
        )
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=self._indent)
                handle.write("\n")
            tmp_path.replace(path)
        except OSError as exc:
            raise DocumentStoreError(
                f"Cannot write wallet document at {path}: {exc}"
            ) from exc
        finally:
            tmp_path.unlink(missing_ok=True)


__all__ = ["JsonDocumentStore"]
