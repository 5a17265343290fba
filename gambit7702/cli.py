#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from gambit7702.commands.accept import parse_bool, report, run_accept, validate_accept_args
from gambit7702.config.logging_config import get_cli_logger
from gambit7702.config.settings import (
    DEFAULT_DOMAIN_NAME,
    DEFAULT_DOMAIN_VERSION,
    DEFAULT_SIGNING_SCHEME,
    PASSWORD_ENV,
    RPC_URL_ENV,
    SIGNING_SCHEMES,
    ZERO_ADDRESS,
)
from gambit7702.errors import AcceptError, ValidationError

logger = logging.getLogger("gambit7702.cli")


def cmd_accept(args: argparse.Namespace) -> int:
    get_cli_logger(verbose=args.verbose, log_file=args.log_file)
    try:
        # Optionally load env file for password / RPC resolution
        if args.env_file:
            if not Path(args.env_file).is_file():
                raise ValidationError(f"--env-file not found: {args.env_file}")
            load_dotenv(args.env_file)

        params = validate_accept_args(args)
        result = run_accept(params)
        report(result)
        return 0
    except ValidationError as ve:
        logger.error(f"Invalid arguments: {ve}")
        print(f"Error: {ve}", file=sys.stderr)
        return 2
    except AcceptError as e:
        logger.error(f"accept failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="AccountSystem7702 action tooling for DegenGambit")
    sub = parser.add_subparsers(dest="cmd")

    # accept
    p_accept = sub.add_parser("accept", help="Accept a slot machine")
    p_accept.add_argument("--keyfile", default="", help="The keyfile to use to sign the transaction")
    p_accept.add_argument("--password", default="", help=f"The password to use to sign the transaction (falls back to {PASSWORD_ENV})")
    p_accept.add_argument("--password-env", dest="password_env", help=f"Env var name holding the keystore password (default {PASSWORD_ENV})")
    p_accept.add_argument("--rpc", default="", help=f"The RPC to use to sign the transaction (falls back to {RPC_URL_ENV})")
    p_accept.add_argument("--target", default="", help="The target to use to sign the transaction")
    p_accept.add_argument("--account", default="", help="The account to use to sign the transaction")
    p_accept.add_argument("--action-nonce", dest="action_nonce", default="", help="The action nonce to use to sign the transaction")
    p_accept.add_argument("--value", default="0", help="The value to use to sign the transaction")
    p_accept.add_argument("--fee-token", dest="fee_token", default=ZERO_ADDRESS, help="The fee token to use to sign the transaction")
    p_accept.add_argument("--fee-value", dest="fee_value", default="0", help="The fee value to use to sign the transaction")
    p_accept.add_argument(
        "--is-basis-points",
        dest="is_basis_points",
        nargs="?",
        const=True,
        default=False,
        type=parse_bool,
        help="Whether the fee value is a basis point",
    )
    p_accept.add_argument(
        "--signing-scheme",
        dest="signing_scheme",
        choices=SIGNING_SCHEMES,
        default=DEFAULT_SIGNING_SCHEME,
        help=(
            f"Signature convention expected by the account (default {DEFAULT_SIGNING_SCHEME}; "
            "unconfirmed, check it against the deployed AccountSystem7702 before relying on it)"
        ),
    )
    p_accept.add_argument("--domain-name", dest="domain_name", default=DEFAULT_DOMAIN_NAME, help="EIP-712 domain name")
    p_accept.add_argument("--domain-version", dest="domain_version", default=DEFAULT_DOMAIN_VERSION, help="EIP-712 domain version")
    p_accept.add_argument("--chain-id", dest="chain_id", default="", help="EIP-712 chain id (default: read from the RPC)")
    p_accept.add_argument("--env-file", dest="env_file", help="Path to .env file to load before resolving env vars")
    p_accept.add_argument("--verbose", action="store_true", help="Enable debug logging")
    p_accept.add_argument("--log-file", dest="log_file", help="Also write logs to this file")
    p_accept.set_defaults(func=cmd_accept)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 2
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
