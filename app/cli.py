# app/cli.py
"""Command-line converter backed by the Fixer API.

    fixer-convert convert USD EUR 100
    fixer-convert rates --symbols USD,GBP,JPY
"""
import argparse
import json
import sys
from dataclasses import asdict
from typing import List, Optional

from app.core.logging import setup_logging
from app.domain.errors import ConversionError
from app.domain.services.conversion_service import convert_with_latest_rates, normalize_currency
from app.infra.providers.fixer import FixerClient, get_fixer_client

DEFAULT_SYMBOLS = "USD,GBP,JPY"


def _echo_amount(amount: float) -> str:
    """``100.0`` -> ``100``, ``1234567.89`` -> ``1234567.89``."""
    return str(int(amount)) if amount.is_integer() else repr(amount)


def run_convert(client: FixerClient, source: str, target: str, amount: float) -> None:
    source, target = normalize_currency(source), normalize_currency(target)
    result, snapshot = convert_with_latest_rates(client, source, target, amount)

    print("\nCURRENCY CONVERSION RESULT\n")
    print(f"{_echo_amount(amount)} {source} = {result.converted:.2f} {target}")
    print(f"Exchange rate: 1 {source} = {result.rate:.6f} {target}")
    print(f"Date: {snapshot.date}\n")


def run_rates(client: FixerClient, symbols: str) -> None:
    snapshot = client.latest()
    print("Exchange rate data:")
    print(json.dumps(asdict(snapshot), indent=2))

    rates = snapshot.with_base()
    print(f"\nExchange rates against 1 {snapshot.base}:")
    for code in symbols.split(","):
        code = normalize_currency(code)
        if not code:
            continue
        print(f"{code}: {rates.get(code, 'n/a')}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fixer-convert",
        description="Convert amounts between currencies using Fixer exchange rates",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    convert_p = sub.add_parser("convert", help="Convert AMOUNT from one currency to another")
    convert_p.add_argument("source", metavar="FROM_CURRENCY")
    convert_p.add_argument("target", metavar="TO_CURRENCY")
    convert_p.add_argument("amount", metavar="AMOUNT", type=float)

    rates_p = sub.add_parser("rates", help="Print the latest Fixer rate table")
    rates_p.add_argument("--symbols", default=DEFAULT_SYMBOLS,
                         help=f"Comma separated codes to highlight (default: {DEFAULT_SYMBOLS})")
    return parser


def main(argv: Optional[List[str]] = None, client: Optional[FixerClient] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("WARNING")
    client = client or get_fixer_client()

    try:
        if args.command == "convert":
            run_convert(client, args.source, args.target, args.amount)
        else:
            run_rates(client, args.symbols)
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
