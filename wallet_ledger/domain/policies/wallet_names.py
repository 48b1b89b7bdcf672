"""Naming rules for newly registered wallets."""


def is_valid_wallet_name(name) -> bool:
    """Return True when the name can identify a new wallet.

    Args:
        name: Candidate wallet name.

    Returns:
        bool: False for non-strings and blank names.
    """
    if not isinstance(name, str):
        return False
    return bool(name.strip())
