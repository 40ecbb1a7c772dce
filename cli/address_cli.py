#!/usr/bin/env python3
"""
CLI for Burst account ID ⇄ address conversion.

Commands:
  python -m cli.address_cli encode ID [ID ...]              # numeric ID -> address
  python -m cli.address_cli decode ADDRESS [ADDRESS ...]    # address -> numeric ID
  python -m cli.address_cli check ADDRESS [ADDRESS ...]     # OK / INVALID per address
"""

from __future__ import annotations

import argparse
import sys

from burstkit import config
from burstkit.address import BurstId, address_to_numeric_id, numeric_id_to_address
from burstkit.errors import CodewordTooLong, ConversionError
from burstkit.logger import logger


def cmd_encode(args: argparse.Namespace) -> int:
    """Print one address per numeric ID."""
    status = 0
    for raw in args.ids:
        try:
            bid = BurstId(int(raw, 10))
        except ValueError as exc:
            logger.warning("encode rejected %r: %s", raw, exc)
            print(f"[!] Not a 64-bit unsigned ID: {raw}", file=sys.stderr)
            status = 1
            continue
        print(numeric_id_to_address(bid, prefix=args.prefix))
    return status


def cmd_decode(args: argparse.Namespace) -> int:
    """Print one numeric ID per address."""
    status = 0
    for raw in args.addresses:
        try:
            print(address_to_numeric_id(raw, prefix=args.prefix, strict=args.strict))
        except CodewordTooLong as exc:
            logger.info("decode rejected %r: %s", raw, exc)
            print(f"[!] Too many symbols: {raw}", file=sys.stderr)
            status = 1
        except ConversionError as exc:
            logger.info("decode rejected %r: %s", raw, exc)
            print(f"[!] Invalid address: {raw}", file=sys.stderr)
            status = 1
    return status


def cmd_check(args: argparse.Namespace) -> int:
    """Report OK/INVALID for each address."""
    status = 0
    for raw in args.addresses:
        try:
            bid = address_to_numeric_id(raw, prefix=args.prefix, strict=args.strict)
        except ConversionError as exc:
            print(f"INVALID  {raw}  ({exc.reason})")
            status = 1
        else:
            print(f"OK       {raw}  {bid}")
    return status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="burstkit-address",
        description="Convert Burst account IDs to checksummed addresses and back",
    )
    parser.add_argument(
        "--prefix",
        default=None,
        help=f"Address prefix (default: {config.PREFIX!r}, env BURSTKIT_PREFIX)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_enc = sub.add_parser("encode", help="Numeric ID -> address")
    p_enc.add_argument("ids", nargs="+", metavar="ID")
    p_enc.set_defaults(func=cmd_encode)

    for name, func, help_text in (
        ("decode", cmd_decode, "Address -> numeric ID"),
        ("check", cmd_check, "Validate addresses"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("addresses", nargs="+", metavar="ADDRESS")
        p.add_argument(
            "--strict",
            action=argparse.BooleanOptionalAction,
            default=config.STRICT_PARSE,
            help="Reject characters other than alphabet symbols and dashes (env BURSTKIT_STRICT_PARSE)",
        )
        p.set_defaults(func=func)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the address CLI."""
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\n\nCancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
