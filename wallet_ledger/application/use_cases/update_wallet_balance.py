"""Use case crediting or debiting a wallet after a settled transaction.

The update is a read-modify-write against the persisted document:

* load the wallets collection from the location;
* find the first record with the requested name;
* compute the new balance and persist it back through the store.

The whole sequence runs under the location's lock so that concurrent updates
inside one process never compute from the same stale balance.
"""

from wallet_ledger.application.ports.document_store import DocumentStorePort
from wallet_ledger.application.use_cases.location_locks import (
    LocationLocks,
    get_default_locks,
)
from wallet_ledger.application.use_cases.wallet_scan import (
    find_first_wallet,
    load_wallet_collection,
)
from wallet_ledger.domain.models.wallet import (
    BalanceDirection,
    BalanceUpdateResult,
    UpdateStatus,
)
from wallet_ledger.domain.services.balance import (
    apply_balance_delta,
    validate_amount,
)
from wallet_ledger.infrastructure.logging.logger import get_app_logger


class UpdateWalletBalanceUseCase:
    """Apply a credit or debit to a named wallet."""

    def __init__(
        self,
        document_store: DocumentStorePort,
        logger=None,
        locks: LocationLocks | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            document_store: Store the wallets are read from and written to.
            logger: Optional logger compatible with logging.Logger-like API.
            locks: Optional lock registry; defaults to the process-wide one.
        """
        self._document_store = document_store
        self._logger = logger or get_app_logger()
        self._locks = locks or get_default_locks()

    def execute(
        self,
        location,
        name: str,
        amount: int,
        direction: BalanceDirection | str,
    ) -> BalanceUpdateResult:
        """Credit or debit the first wallet named ``name``.

        A missing wallet is not an error: the miss is logged and nothing is
        written. Balances may go negative.

        Args:
            location: Handle naming the persisted document.
            name: Wallet name to update.
            amount: Non-negative amount to move.
            direction: ``credit`` adds the amount, ``debit`` subtracts it.

        Returns:
            BalanceUpdateResult: UPDATED with both balances, or NOT_FOUND.
        """
        validate_amount(amount)
        resolved = BalanceDirection.parse(direction)

        with self._locks.lock_for(location):
            collection = load_wallet_collection(self._document_store, location)
            wallet = find_first_wallet(collection, name, location)
            if wallet is None:
                self._logger.info(f"No account found for '{name}'")
                return BalanceUpdateResult(
                    status=UpdateStatus.NOT_FOUND,
                    name=name,
                )

            new_balance = apply_balance_delta(wallet.balance, amount, resolved)
            self._document_store.write_balance(location, name, new_balance)

        self._logger.info(
            f"Applied {resolved.value} of {amount} to '{name}': "
            f"{wallet.balance} -> {new_balance}"
        )
        return BalanceUpdateResult(
            status=UpdateStatus.UPDATED,
            name=name,
            previous_balance=wallet.balance,
            new_balance=new_balance,
        )


__all__ = ["UpdateWalletBalanceUseCase"]
