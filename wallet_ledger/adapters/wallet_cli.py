"""CLI adapter exposing wallet lookups and balance updates.

This module wires the WalletLedger to the configured document store and
provides the ``wallet-ledger`` command-line entry point. The location and
backend come from ``WALLETS_LOCATION`` / ``WALLET_BACKEND`` unless overridden
with ``--location`` / ``--backend``.
"""

import argparse

from wallet_ledger.domain.errors import WalletLedgerError
from wallet_ledger.domain.models.wallet import BalanceDirection, Wallet
from wallet_ledger.infrastructure.container import build_wallet_ledger
from wallet_ledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from wallet_ledger.infrastructure.settings import WalletSettings


EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the wallet CLI."""
    parser = argparse.ArgumentParser(
        prog="wallet-ledger",
        description="Look up wallets and apply settled balance updates.",
    )
    parser.add_argument("--location", help="JSON file path or database URL")
    parser.add_argument(
        "--backend",
        choices=["json", "sqlalchemy"],
        help="Document store backend",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    for command in ("exists", "address", "balance"):
        sub = commands.add_parser(command, help=f"Show wallet {command}")
        sub.add_argument("name")

    for direction in BalanceDirection:
        sub = commands.add_parser(
            direction.value,
            help=f"{direction.value.capitalize()} a wallet balance",
        )
        sub.add_argument("name")
        sub.add_argument("amount", type=int)

    register = commands.add_parser("register", help="Register a new wallet")
    register.add_argument("name")
    register.add_argument("address")
    register.add_argument("--balance", type=int, default=0)
    return parser


def _run(args: argparse.Namespace, ledger, location) -> int:
    if args.command == "exists":
        found = ledger.exists(location, args.name)
        print(f"{args.name}: {'exists' if found else 'not found'}")
        return EXIT_OK if found else EXIT_NOT_FOUND

    if args.command in ("address", "balance"):
        if args.command == "address":
            value = ledger.lookup_address(location, args.name)
        else:
            value = ledger.lookup_balance(location, args.name)
        if value is None:
            print(f"No account found for '{args.name}'")
            return EXIT_NOT_FOUND
        print(value)
        return EXIT_OK

    if args.command == "register":
        wallet = ledger.register(
            location,
            Wallet(
                name=args.name,
                address=args.address,
                balance=args.balance,
            ),
        )
        print(f"Registered '{wallet.name}' with balance {wallet.balance}")
        return EXIT_OK

    result = ledger.update_balance(
        location,
        args.name,
        args.amount,
        args.command,
    )
    if not result.updated:
        print(f"No account found for '{args.name}'")
        return EXIT_NOT_FOUND
    print(
        f"{result.name}: {result.previous_balance} -> {result.new_balance}"
    )
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Run one wallet command and return the process exit status."""
    args = build_parser().parse_args(argv)
    logger = get_app_logger()
    usage_logger = get_usage_logger()
    usage_logger.info(f"command={args.command} name={args.name}")

    try:
        settings = WalletSettings.from_env().with_overrides(
            backend=args.backend,
            location=args.location,
        )
        location = settings.require_location()
        ledger = build_wallet_ledger(settings)
        return _run(args, ledger, location)
    except (WalletLedgerError, RuntimeError, ValueError, TypeError) as exc:
        logger.error(f"wallet-ledger {args.command} failed: {exc}")
        return EXIT_ERROR


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
