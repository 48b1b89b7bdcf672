"""Domain errors raised by the wallet ledger."""


class WalletLedgerError(Exception):
    """Base class for wallet ledger failures."""


class MalformedWalletDataError(WalletLedgerError, ValueError):
    """A persisted document does not have the expected wallet shape."""


class DuplicateWalletError(WalletLedgerError, ValueError):
    """A wallet with the same name already exists at the location."""


class BalanceOverflowError(WalletLedgerError, ArithmeticError):
    """A computed balance falls outside the signed 64-bit range."""


__all__ = [
    "WalletLedgerError",
    "MalformedWalletDataError",
    "DuplicateWalletError",
    "BalanceOverflowError",
]
