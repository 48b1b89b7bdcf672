"""Domain models for wallets and balance updates."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Wallet:
    """A named wallet holding an opaque address and an integer balance."""

    name: str
    address: str
    balance: int

    def as_record(self) -> dict[str, Any]:
        """Return the mapping persisted inside the wallets collection."""
        return {
            "name": self.name,
            "address": self.address,
            "balance": self.balance,
        }


class BalanceDirection(str, Enum):
    """Direction of a balance update."""

    CREDIT = "credit"
    DEBIT = "debit"

    @classmethod
    def parse(cls, value: "BalanceDirection | str") -> "BalanceDirection":
        """Resolve a direction from an enum member or its spelling.

        Args:
            value: Direction member, ``credit``/``debit``, or the legacy
                ``add``/``subtract`` spellings.

        Returns:
            BalanceDirection: Matching direction.

        Raises:
            ValueError: If the value names no known direction.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        if normalized in _LEGACY_DIRECTIONS:
            return _LEGACY_DIRECTIONS[normalized]
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(
                f"Unsupported balance direction: {value!r}. "
                "Expected credit or debit."
            ) from None


_LEGACY_DIRECTIONS = {
    "add": BalanceDirection.CREDIT,
    "subtract": BalanceDirection.DEBIT,
}


class UpdateStatus(str, Enum):
    """Outcome of a balance update."""

    UPDATED = "updated"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class BalanceUpdateResult:
    """Result of an update_balance call.

    Attributes:
        status: Whether the wallet was updated or not found.
        name: Wallet name the update targeted.
        previous_balance: Balance read before the update, if found.
        new_balance: Balance persisted by the update, if found.
    """

    status: UpdateStatus
    name: str
    previous_balance: int | None = None
    new_balance: int | None = None

    @property
    def updated(self) -> bool:
        return self.status is UpdateStatus.UPDATED


__all__ = [
    "Wallet",
    "BalanceDirection",
    "UpdateStatus",
    "BalanceUpdateResult",
]
