#!/usr/bin/env python3
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from eth_account import Account
from eth_account.signers.local import LocalAccount

from gambit7702.config.settings import PASSWORD_ENV
from gambit7702.errors import KeyLoadError


def resolve_password(cli_pass: str | None, pass_env: str | None = None) -> str:
    """Resolve keystore password from CLI or environment variable name.

    Precedence: cli_pass > env[pass_env] > env["KEYSTORE_PASSWORD"].
    Falls back to the empty password, which keystores may legitimately use.
    """
    if cli_pass:
        return cli_pass
    if pass_env:
        pwd = os.getenv(pass_env)
        if pwd:
            return pwd
    return os.getenv(PASSWORD_ENV) or ""


def read_keystore(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise KeyLoadError(f"keystore file not found: {path}") from e
    except (OSError, ValueError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        raise KeyLoadError(f"could not read keystore {path}: {e}") from e


def decrypt_keystore(keystore_json: dict[str, Any], password: str) -> str:
    """Decrypt a keystore JSON and return the 0x-prefixed private key hex string."""
    try:
        key_bytes = Account.decrypt(keystore_json, password)
    except (ValueError, KeyError, TypeError) as e:
        # eth-account raises ValueError("MAC mismatch") on a wrong password
        raise KeyLoadError(f"could not decrypt keystore: {e}") from e
    # Ensure plain bytes before hex() to avoid leading '0x' from HexBytes.hex()
    return "0x" + bytes(key_bytes).hex()


def load_key(path: str | Path, password: str) -> LocalAccount:
    """Read and decrypt a keystore file into a signing account."""
    keystore_json = read_keystore(Path(path))
    priv_hex = decrypt_keystore(keystore_json, password)
    return Account.from_key(priv_hex)
