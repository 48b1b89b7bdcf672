"""Use case appending a new wallet to a persisted collection."""

from wallet_ledger.application.ports.document_store import DocumentStorePort
from wallet_ledger.application.use_cases.location_locks import (
    LocationLocks,
    get_default_locks,
)
from wallet_ledger.application.use_cases.wallet_scan import (
    find_first_wallet,
    load_wallet_collection,
)
from wallet_ledger.domain.constants import WALLETS_COLLECTION
from wallet_ledger.domain.errors import DuplicateWalletError
from wallet_ledger.domain.models.wallet import Wallet
from wallet_ledger.domain.policies.wallet_names import is_valid_wallet_name
from wallet_ledger.domain.services.validation import validate_wallet_record
from wallet_ledger.infrastructure.logging.logger import get_app_logger


class RegisterWalletUseCase:
    """Register a wallet, rejecting names already present at the location."""

    def __init__(
        self,
        document_store: DocumentStorePort,
        logger=None,
        locks: LocationLocks | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            document_store: Store receiving the new record.
            logger: Optional logger compatible with logging.Logger-like API.
            locks: Optional lock registry; defaults to the process-wide one.
        """
        self._document_store = document_store
        self._logger = logger or get_app_logger()
        self._locks = locks or get_default_locks()

    def execute(self, location, wallet: Wallet) -> Wallet:
        """Append ``wallet`` to the wallets collection at ``location``.

        Args:
            location: Handle naming the persisted document.
            wallet: Wallet to register.

        Returns:
            Wallet: The registered wallet.

        Raises:
            ValueError: If the name is blank.
            MalformedWalletDataError: If a field has the wrong type.
            DuplicateWalletError: If the name is already registered.
        """
        if not is_valid_wallet_name(wallet.name):
            raise ValueError(f"Invalid wallet name: {wallet.name!r}")
        record = wallet.as_record()
        validate_wallet_record(record, location, index=None)

        with self._locks.lock_for(location):
            collection = load_wallet_collection(self._document_store, location)
            existing = find_first_wallet(collection, wallet.name, location)
            if existing is not None:
                raise DuplicateWalletError(
                    f"Wallet '{wallet.name}' already exists at {location}"
                )
            self._document_store.write(location, WALLETS_COLLECTION, record)

        self._logger.info(f"Registered wallet '{wallet.name}' at {location}")
        return wallet


__all__ = ["RegisterWalletUseCase"]
