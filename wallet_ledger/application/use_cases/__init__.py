"""Application use cases package."""

from .get_wallet_address import GetWalletAddressUseCase
from .get_wallet_balance import GetWalletBalanceUseCase
from .location_locks import LocationLocks, get_default_locks
from .register_wallet import RegisterWalletUseCase
from .update_wallet_balance import UpdateWalletBalanceUseCase
from .wallet_exists import WalletExistsUseCase
from .wallet_ledger import WalletLedger

__all__ = [
    "GetWalletAddressUseCase",
    "GetWalletBalanceUseCase",
    "LocationLocks",
    "get_default_locks",
    "RegisterWalletUseCase",
    "UpdateWalletBalanceUseCase",
    "WalletExistsUseCase",
    "WalletLedger",
]
