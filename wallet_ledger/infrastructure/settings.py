"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Optional

import dotenv

from wallet_ledger.utils.utils import normalize_location


@dataclass(frozen=True)
class WalletSettings:
    """Settings for selecting the wallet store and its location.

    Attributes:
        backend: Store identifier (json or sqlalchemy).
        location: Path of the JSON document or database URL, if configured.
    """

    backend: str = "json"
    location: Optional[Path | str] = None

    @classmethod
    def from_env(cls) -> "WalletSettings":
        """Build settings from environment variables and an optional .env.

        Returns:
            WalletSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = os.getenv("WALLET_BACKEND", "json").strip().lower()
        raw_location = os.getenv("WALLETS_LOCATION", "").strip()
        location = None
        if raw_location:
            location = normalize_location(raw_location)
        return cls(backend=backend, location=location)

    def with_overrides(
        self,
        backend: str | None = None,
        location: str | None = None,
    ) -> "WalletSettings":
        """Return a copy with command-line overrides applied."""
        return replace(
            self,
            backend=backend.strip().lower() if backend else self.backend,
            location=(
                normalize_location(location)
                if location
                else self.location
            ),
        )

    def require_location(self) -> Path | str:
        """Return the configured location or fail with guidance.

        Raises:
            RuntimeError: If no location is configured.
        """
        if self.location is None:
            raise RuntimeError(
                "No wallet location configured. Set WALLETS_LOCATION or "
                "pass --location."
            )
        return self.location


__all__ = ["WalletSettings"]
