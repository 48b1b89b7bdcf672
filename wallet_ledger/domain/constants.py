"""Domain constants for persisted wallet documents."""

WALLETS_COLLECTION = "wallets"

WALLET_FIELDS = ("name", "address", "balance")

# Balances are stored and computed as signed 64-bit integers.
BALANCE_MIN = -(2**63)
BALANCE_MAX = 2**63 - 1


__all__ = [
    "WALLETS_COLLECTION",
    "WALLET_FIELDS",
    "BALANCE_MIN",
    "BALANCE_MAX",
]
