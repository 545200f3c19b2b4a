# src/levchange/app.py
"""
Application Entry Point - Command-Line Interface

This module is the composition root for the levchange command. It loads
settings, configures logging and drives the calculator:

    levchange change 8 20 --price-currency EUR --paid-currency BGN
    levchange convert 20 --from BGN

Exit codes: 0 on success (including exact payment and the "awaiting input"
message), 1 when the payment does not cover the price, 2 on usage errors.

Files that USE this module:
- pyproject.toml (levchange console script)

Files that this module USES:
- levchange.config (settings for defaults and logging)
- levchange.shared.logging_conf (setup_logging)
- levchange.shared.validators (parse_amount)
- levchange.application (converter and calculator state)
- levchange.adapters.formatting.formatter (text output)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import argparse  # Command-line parsing
import logging  # Standard library for logging messages
import sys  # Exit codes
from typing import List, Optional  # Type hints

from levchange.adapters.formatting.formatter import conversion_lines, render_result
from levchange.application.calculator_state import DisplayState, derive, initial_inputs
from levchange.application.converter import to_bgn, to_eur
from levchange.domain.errors import InvalidCurrencyError
from levchange.domain.models import Currency
from levchange.shared.logging_conf import setup_logging
from levchange.shared.validators import parse_amount

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INSUFFICIENT = 1


def _currency_arg(value: str) -> Currency:
    """argparse type for EUR/BGN options."""
    try:
        return Currency.parse(value)
    except InvalidCurrencyError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the levchange command."""
    parser = argparse.ArgumentParser(
        prog="levchange",
        description="Calculate change in EUR and BGN at the fixed rate 1 EUR = 1.95583 BGN",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    change = subparsers.add_parser("change", help="Calculate the change owed")
    change.add_argument("price", help="Price of the purchase (e.g. 8 or 7,89)")
    change.add_argument("paid", help="Amount paid by the customer")
    change.add_argument(
        "--price-currency",
        type=_currency_arg,
        default=None,
        help="Currency of the price: EUR or BGN (default from DEFAULT_PRICE_CURRENCY)",
    )
    change.add_argument(
        "--paid-currency",
        type=_currency_arg,
        default=None,
        help="Currency of the payment: EUR or BGN (default from DEFAULT_PAID_CURRENCY)",
    )

    convert = subparsers.add_parser("convert", help="Show an amount in both currencies")
    convert.add_argument("amount", help="Amount to convert")
    convert.add_argument(
        "--from",
        dest="currency",
        type=_currency_arg,
        default=Currency.BGN,
        help="Currency of the amount: EUR or BGN (default: BGN)",
    )

    return parser


def _run_change(args: argparse.Namespace, decimals: int) -> int:
    inputs = (
        initial_inputs(args.price_currency, args.paid_currency)
        .with_price_input(args.price)
        .with_paid_input(args.paid)
    )
    snapshot = derive(inputs)
    logger.debug(
        "Change for price=%s %s paid=%s %s: %s",
        snapshot.price_value,
        inputs.price_currency,
        snapshot.paid_value,
        inputs.paid_currency,
        snapshot.change_result,
    )
    print(render_result(snapshot, decimals))
    if snapshot.display_state is DisplayState.INSUFFICIENT:
        return EXIT_INSUFFICIENT
    return EXIT_OK


def _run_convert(args: argparse.Namespace, decimals: int) -> int:
    amount = parse_amount(args.amount)
    eur = to_eur(amount, args.currency)
    bgn = to_bgn(amount, args.currency)
    logger.debug("Converted %s %s -> %s EUR / %s BGN", amount, args.currency, eur, bgn)
    print(conversion_lines(amount, args.currency, eur, bgn, decimals))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the levchange command.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Import settings here so --help works even with a broken .env
    from levchange.config import settings

    setup_logging(
        level=logging.DEBUG if args.verbose else settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_stdout=settings.log_stdout,
    )

    if args.command == "change":
        return _run_change(args, settings.display_decimals)
    return _run_convert(args, settings.display_decimals)


if __name__ == "__main__":
    sys.exit(main())
