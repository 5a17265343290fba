#!/usr/bin/env python3
"""
Accept command: sign an AccountSystem7702 action that calls DegenGambit.accept().

Flow
----
1. Validate flags (addresses, integers) before any file or network access
2. Decrypt the keystore
3. Open the RPC client
4. Resolve the action nonce (on-chain counter + 1 unless --action-nonce)
5. Build and sign the Action
6. Pack execute(Action[], bytes[]) calldata
7. Print signature, action and calldata
"""
from __future__ import annotations

import argparse
import logging
import re
import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from eth_account.signers.local import LocalAccount
from eth_utils import is_hex_address
from web3 import Web3

from gambit7702.config.settings import (
    DEFAULT_DOMAIN_NAME,
    DEFAULT_DOMAIN_VERSION,
    DEFAULT_SIGNING_SCHEME,
    SIGNING_SCHEME_EIP712,
    SIGNING_SCHEMES,
    UINT256_MAX,
    ZERO_ADDRESS,
)
from gambit7702.errors import KeyLoadError, ValidationError
from gambit7702.helpers.action import Action, build_accept_action, resolve_action_nonce
from gambit7702.helpers.action_signer import SigningDomain, sign_action
from gambit7702.helpers.calldata import accept_calldata, execute_calldata
from gambit7702.helpers.web3_setup import get_chain_id, get_web3_instance, resolve_rpc_url
from gambit7702.setup.keystore import load_key, resolve_password

logger = logging.getLogger(__name__)

_DECIMAL_RE = re.compile(r"[0-9]+", re.ASCII)


@dataclass(frozen=True)
class AcceptParams:
    """Validated inputs of the accept command."""

    keyfile: str
    password: str
    rpc: str
    target: str
    account: str
    action_nonce: Optional[int] = None
    value: int = 0
    fee_token: str = ZERO_ADDRESS
    fee_value: int = 0
    is_basis_points: bool = False
    signing_scheme: str = DEFAULT_SIGNING_SCHEME
    domain_name: str = DEFAULT_DOMAIN_NAME
    domain_version: str = DEFAULT_DOMAIN_VERSION
    chain_id: Optional[int] = None


@dataclass(frozen=True)
class AcceptResult:
    action: Action
    signature: bytes
    calldata: bytes


def parse_address(raw: str | None, flag: str) -> str:
    """Validate a hex address flag and return it in checksum form."""
    if not raw or not is_hex_address(raw):
        raise ValidationError(f"{flag} is not a valid Ethereum address")
    return Web3.to_checksum_address(raw if raw.lower().startswith("0x") else "0x" + raw)


def parse_uint(raw: str | None, flag: str, default: Optional[int] = None) -> Optional[int]:
    """Parse a base-10 unsigned integer flag; empty input yields ``default``."""
    if raw is None or raw == "":
        return default
    if not _DECIMAL_RE.fullmatch(raw):
        raise ValidationError(f"{flag} is not a valid big integer")
    parsed = int(raw, 10)
    if parsed > UINT256_MAX:
        raise ValidationError(f"{flag} does not fit in uint256")
    return parsed


def parse_bool(raw: str) -> bool:
    """argparse type for --is-basis-points=true|false."""
    lowered = raw.strip().lower()
    if lowered in ("1", "t", "true", "yes", "y"):
        return True
    if lowered in ("0", "f", "false", "no", "n"):
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {raw!r}")


def validate_accept_args(args: argparse.Namespace) -> AcceptParams:
    """
    Turn raw CLI flags into AcceptParams.

    Checks run in flag order and stop at the first problem. Nothing here
    touches the keystore or the network.

    Raises:
        ValidationError: naming the offending flag
    """
    keyfile = args.keyfile or ""
    if keyfile == "":
        raise ValidationError("--keyfile not specified (this should be a path to an Ethereum account keystore file)")

    rpc = resolve_rpc_url(args.rpc)
    if rpc == "":
        raise ValidationError("--rpc not specified (this should be a URL to an Ethereum JSONRPC API)")

    target = parse_address(args.target, "--target")
    account = parse_address(args.account, "--account")
    action_nonce = parse_uint(args.action_nonce, "--action-nonce")
    value = parse_uint(args.value, "--value", default=0)
    fee_token = parse_address(args.fee_token, "--fee-token")
    fee_value = parse_uint(args.fee_value, "--fee-value", default=0)

    signing_scheme = getattr(args, "signing_scheme", None) or DEFAULT_SIGNING_SCHEME
    if signing_scheme not in SIGNING_SCHEMES:
        raise ValidationError(f"--signing-scheme must be one of {', '.join(SIGNING_SCHEMES)}")
    chain_id = parse_uint(getattr(args, "chain_id", None), "--chain-id")

    return AcceptParams(
        keyfile=keyfile,
        password=resolve_password(args.password, getattr(args, "password_env", None)),
        rpc=rpc,
        target=target,
        account=account,
        action_nonce=action_nonce,
        value=value,
        fee_token=fee_token,
        fee_value=fee_value,
        is_basis_points=bool(args.is_basis_points),
        signing_scheme=signing_scheme,
        domain_name=getattr(args, "domain_name", None) or DEFAULT_DOMAIN_NAME,
        domain_version=getattr(args, "domain_version", None) or DEFAULT_DOMAIN_VERSION,
        chain_id=chain_id,
    )


def accept(w3: Web3, account: LocalAccount, params: AcceptParams) -> AcceptResult:
    """Build, sign and pack the accept action for an already-open client."""
    accept_data = accept_calldata()

    nonce = resolve_action_nonce(w3, params.account, params.action_nonce)

    action = build_accept_action(
        target=params.target,
        accept_data=accept_data,
        nonce=nonce,
        value=params.value,
        fee_token=params.fee_token,
        fee_value=params.fee_value,
        is_basis_points=params.is_basis_points,
    )
    logger.info(f"Built action {action} (fee {action.fee_amount})")

    domain = None
    if params.signing_scheme == SIGNING_SCHEME_EIP712:
        chain_id = params.chain_id if params.chain_id is not None else get_chain_id(w3)
        domain = SigningDomain(
            chain_id=chain_id,
            verifying_contract=params.account,
            name=params.domain_name,
            version=params.domain_version,
        )
        logger.info(f"Signing with EIP-712 domain {domain.as_dict()}")

    signature = sign_action(action, account.key, domain)
    calldata = execute_calldata([action], [signature])
    return AcceptResult(action=action, signature=signature, calldata=calldata)


def run_accept(
    params: AcceptParams,
    key_loader: Optional[Callable[[str, str], LocalAccount]] = None,
    client_factory: Optional[Callable[[str], Web3]] = None,
) -> AcceptResult:
    """Load the key, open the client and run the accept pipeline."""
    key_loader = key_loader or load_key
    client_factory = client_factory or get_web3_instance
    try:
        account = key_loader(params.keyfile, params.password)
    except KeyLoadError as e:
        raise KeyLoadError(f"Failed to load key: {e}") from e

    if account.address.lower() != params.account.lower():
        logger.warning(f"Keystore address {account.address} does not match --account {params.account}")

    w3 = client_factory(params.rpc)
    return accept(w3, account, params)


def report(result: AcceptResult, out: TextIO | None = None) -> None:
    out = out or sys.stdout
    print(f"signedAction: {result.signature.hex()}", file=out)
    print(f"action: {result.action}", file=out)
    print(f"calldata: {result.calldata.hex()}", file=out)
