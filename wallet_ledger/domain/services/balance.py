"""Balance arithmetic for credit and debit updates."""

from wallet_ledger.domain.constants import BALANCE_MAX, BALANCE_MIN
from wallet_ledger.domain.errors import BalanceOverflowError
from wallet_ledger.domain.models.wallet import BalanceDirection


def validate_amount(amount) -> None:
    """Ensure an update amount is a non-negative 64-bit integer.

    Args:
        amount: Amount supplied by the caller.

    Raises:
        TypeError: If the amount is not an integer.
        ValueError: If the amount is negative or too large.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(
            f"Amount must be an integer, got {type(amount).__name__}"
        )
    if amount < 0:
        raise ValueError(f"Amount must not be negative: {amount}")
    if amount > BALANCE_MAX:
        raise ValueError(f"Amount exceeds the 64-bit range: {amount}")


def apply_balance_delta(
    balance: int,
    amount: int,
    direction: BalanceDirection | str,
) -> int:
    """Compute the balance after crediting or debiting an amount.

    No floor is applied: debiting past zero yields a negative balance.

    Args:
        balance: Current balance.
        amount: Non-negative amount to move.
        direction: Credit adds the amount, debit subtracts it.

    Returns:
        int: The new balance.

    Raises:
        BalanceOverflowError: If the result leaves the 64-bit range.
    """
    validate_amount(amount)
    resolved = BalanceDirection.parse(direction)
    if resolved is BalanceDirection.CREDIT:
        new_balance = balance + amount
    else:
        new_balance = balance - amount
    if not BALANCE_MIN <= new_balance <= BALANCE_MAX:
        raise BalanceOverflowError(
            f"Balance {balance} {resolved.value} {amount} "
            f"overflows the 64-bit range"
        )
    return new_balance


__all__ = ["apply_balance_delta", "validate_amount"]
