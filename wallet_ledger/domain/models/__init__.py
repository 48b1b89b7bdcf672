"""Domain models package."""

from .wallet import (
    BalanceDirection,
    BalanceUpdateResult,
    UpdateStatus,
    Wallet,
)

__all__ = [
    "Wallet",
    "BalanceDirection",
    "UpdateStatus",
    "BalanceUpdateResult",
]
