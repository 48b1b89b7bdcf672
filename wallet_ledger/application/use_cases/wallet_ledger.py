"""Facade bundling the wallet use cases behind one object."""

from wallet_ledger.application.ports.document_store import DocumentStorePort
from wallet_ledger.application.use_cases.get_wallet_address import (
    GetWalletAddressUseCase,
)
from wallet_ledger.application.use_cases.get_wallet_balance import (
    GetWalletBalanceUseCase,
)
from wallet_ledger.application.use_cases.location_locks import LocationLocks
from wallet_ledger.application.use_cases.register_wallet import (
    RegisterWalletUseCase,
)
from wallet_ledger.application.use_cases.update_wallet_balance import (
    UpdateWalletBalanceUseCase,
)
from wallet_ledger.application.use_cases.wallet_exists import (
    WalletExistsUseCase,
)
from wallet_ledger.domain.models.wallet import (
    BalanceDirection,
    BalanceUpdateResult,
    Wallet,
)
from wallet_ledger.infrastructure.logging.logger import get_app_logger


class WalletLedger:
    """Lookup and balance-update operations over a document store.

    Every operation reloads the document from ``location``; the ledger
    holds no cached state between calls.
    """

    def __init__(
        self,
        document_store: DocumentStorePort,
        logger=None,
        locks: LocationLocks | None = None,
    ) -> None:
        resolved_logger = logger or get_app_logger()
        self._exists = WalletExistsUseCase(document_store)
        self._address = GetWalletAddressUseCase(document_store)
        self._balance = GetWalletBalanceUseCase(document_store)
        self._update = UpdateWalletBalanceUseCase(
            document_store,
            logger=resolved_logger,
            locks=locks,
        )
        self._register = RegisterWalletUseCase(
            document_store,
            logger=resolved_logger,
            locks=locks,
        )

    def exists(self, location, name: str) -> bool:
        return self._exists.execute(location, name)

    def lookup_address(self, location, name: str) -> str | None:
        return self._address.execute(location, name)

    def lookup_balance(self, location, name: str) -> int | None:
        return self._balance.execute(location, name)

    def update_balance(
        self,
        location,
        name: str,
        amount: int,
        direction: BalanceDirection | str,
    ) -> BalanceUpdateResult:
        return self._update.execute(location, name, amount, direction)

    def credit(self, location, name: str, amount: int) -> BalanceUpdateResult:
        return self.update_balance(
            location, name, amount, BalanceDirection.CREDIT
        )

    def debit(self, location, name: str, amount: int) -> BalanceUpdateResult:
        return self.update_balance(
            location, name, amount, BalanceDirection.DEBIT
        )

    def register(self, location, wallet: Wallet) -> Wallet:
        return self._register.execute(location, wallet)


__all__ = ["WalletLedger"]
