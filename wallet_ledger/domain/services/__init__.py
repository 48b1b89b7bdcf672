"""Domain services package."""

from .balance import apply_balance_delta, validate_amount
from .validation import validate_wallet_record, wallet_collection

__all__ = [
    "apply_balance_delta",
    "validate_amount",
    "validate_wallet_record",
    "wallet_collection",
]
