"""Domain policies package."""

from .wallet_names import is_valid_wallet_name

__all__ = ["is_valid_wallet_name"]
