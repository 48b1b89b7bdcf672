"""Domain package for wallet rules and core models."""

from .constants import (
    BALANCE_MAX,
    BALANCE_MIN,
    WALLET_FIELDS,
    WALLETS_COLLECTION,
)
from .errors import (
    BalanceOverflowError,
    DuplicateWalletError,
    MalformedWalletDataError,
    WalletLedgerError,
)
from .models import (
    BalanceDirection,
    BalanceUpdateResult,
    UpdateStatus,
    Wallet,
)
from .policies import is_valid_wallet_name
from .services import (
    apply_balance_delta,
    validate_amount,
    validate_wallet_record,
    wallet_collection,
)

__all__ = [
    "BALANCE_MAX",
    "BALANCE_MIN",
    "WALLET_FIELDS",
    "WALLETS_COLLECTION",
    "BalanceOverflowError",
    "DuplicateWalletError",
    "MalformedWalletDataError",
    "WalletLedgerError",
    "BalanceDirection",
    "BalanceUpdateResult",
    "UpdateStatus",
    "Wallet",
    "is_valid_wallet_name",
    "apply_balance_delta",
    "validate_amount",
    "validate_wallet_record",
    "wallet_collection",
]
